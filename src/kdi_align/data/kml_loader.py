"""KML loader for the points-of-interest layers."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from kdi_align.models.sources import Placemark

logger = logging.getLogger(__name__)


def parse_placemarks(root: ET.Element) -> list[Placemark]:
    """Extract placemarks in document order, whatever the KML namespace.

    Raises:
        ValueError: If a placemark has no Point/coordinates.
    """
    placemarks: list[Placemark] = []
    for element in root.iterfind(".//{*}Placemark"):
        coordinates = element.findtext("{*}Point/{*}coordinates")
        if coordinates is None:
            raise ValueError("Placemark without Point/coordinates")
        data = {
            simple.get("name", ""): (simple.text or "").strip()
            for simple in element.iterfind(".//{*}ExtendedData/{*}SchemaData/{*}SimpleData")
        }
        placemarks.append(Placemark(coordinates=coordinates.strip(), data=data))
    return placemarks


def load_placemarks(kml_path: Path) -> list[Placemark]:
    """Load every placemark of a KML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        xml.etree.ElementTree.ParseError: If the file is not well-formed XML.
    """
    kml_path = Path(kml_path)
    if not kml_path.exists():
        raise FileNotFoundError(f"KML file not found: {kml_path}")
    placemarks = parse_placemarks(ET.parse(kml_path).getroot())
    logger.debug(f"Loaded {len(placemarks):,} placemarks from {kml_path.name}")
    return placemarks
