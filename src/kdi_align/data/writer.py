"""JSON writer for the aligned model."""

import json
import logging
import shutil
from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from kdi_align.alignment.assembler import AlignedModel
from kdi_align.models.domain import ENUM_DOCUMENTS

logger = logging.getLogger(__name__)


def dump_entities(entities: list[BaseModel]) -> bytes:
    """Serialize a collection as a compact JSON array with camelCase names."""
    documents = [entity.model_dump(mode="json", by_alias=True) for entity in entities]
    return json.dumps(documents, ensure_ascii=False, separators=(",", ":")).encode()


def dump_enum(enum: type[Enum]) -> bytes:
    """Serialize the variant names of an enumeration as {"value": [...]}."""
    return json.dumps({"value": [member.value for member in enum]}, separators=(",", ":")).encode()


class ModelWriter:
    """Writes every collection and enumeration of a model into one directory."""

    def __init__(self, output_dir: Path):
        """Initialize the writer.

        Args:
            output_dir: Directory that will hold the JSON files.
        """
        self.output_dir = Path(output_dir).resolve()

    def write(self, model: AlignedModel) -> dict[str, int]:
        """Write the model, replacing the output directory atomically.

        Files are written into a temporary sibling directory, which replaces
        the output directory only once every file is in place. A failed
        write leaves the previous output untouched.

        Returns:
            Dictionary with entity counts per collection.
        """
        self.output_dir.parent.mkdir(parents=True, exist_ok=True)
        temp_dir = self.output_dir.with_name(self.output_dir.name + ".tmp")
        old_dir = self.output_dir.with_name(self.output_dir.name + ".old")

        try:
            # Remove leftovers of a previous failed run
            shutil.rmtree(temp_dir, ignore_errors=True)
            temp_dir.mkdir()

            for name, entities in model.collections().items():
                logger.info(f"Writing {name}.json")
                (temp_dir / f"{name}.json").write_bytes(dump_entities(entities))

            for name, enum in ENUM_DOCUMENTS.items():
                logger.info(f"Writing {name}.json")
                (temp_dir / f"{name}.json").write_bytes(dump_enum(enum))

            # atomic swap
            shutil.rmtree(old_dir, ignore_errors=True)
            if self.output_dir.exists():
                self.output_dir.rename(old_dir)
            temp_dir.rename(self.output_dir)
            shutil.rmtree(old_dir, ignore_errors=True)

            logger.info(f"Alignment written to {self.output_dir}")
            return model.counts()

        except Exception:
            shutil.rmtree(temp_dir, ignore_errors=True)
            if old_dir.exists() and not self.output_dir.exists():
                old_dir.rename(self.output_dir)
            raise
