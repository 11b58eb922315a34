import json
import logging
from pathlib import Path
from typing import Optional

from element_ldb.errors import SerializationFailure
from element_ldb.extraction.record import ElementMetadata

logger = logging.getLogger(__name__)


# ==============================================
# MetadataStore
# ==============================================
#
# PURPOSE:
#   Persist extracted metadata to disk so a run can be inspected or
#   compared later without reopening the (possibly locked) LevelDB.
#
# WHAT IS PERSISTED:
#   One JSON file per export, same layout as MetadataExtractor.export_json():
#   keys in ElementMetadata field order, absent scalars as null.
#
# CLASS: MetadataStore
# --------------------
#   Stateful — holds a reference to the output directory.
#
#   Constructor:
#   ------------
#   - __init__(output_dir: str = "metadata/")
#       Create output directory if it doesn't exist.
#
class MetadataStore:
    """
    Handles persistence of extracted metadata to disk.

    Files created:
    - metadata/metadata.json  → Exported ElementMetadata (default name)
    """

    DEFAULT_NAME = "metadata.json"

    def __init__(self, output_dir: str = "metadata/", indent: Optional[int] = 2):
        """
        Initialize the metadata store.

        Args:
            output_dir: Directory to store metadata files
            indent: JSON indentation used when saving
        """
        self.output_dir = Path(output_dir)
        self.indent = indent

        # Create directory if it doesn't exist
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str = DEFAULT_NAME) -> Path:
        return self.output_dir / name
#   Methods:
#   --------
#   - save(metadata, name="metadata.json") -> Path
#       Serialize metadata to a JSON file.
#
#   - load(name="metadata.json") -> ElementMetadata | None
#       Deserialize metadata. Return None if no file.
#
    def save(self, metadata: ElementMetadata, name: str = DEFAULT_NAME) -> Path:
        """
        Save extracted metadata to disk.

        Args:
            metadata: Record returned by MetadataExtractor.extract_all()
            name: File name inside the output directory

        Returns:
            Path of the written file
        """
        path = self.path_for(name)
        try:
            text = json.dumps(metadata.to_dict(), indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationFailure(f"Failed to encode metadata as JSON: {e}") from e

        path.write_text(text, encoding="utf-8")
        logger.info("Saved metadata (%d raw entries) to %s", len(metadata.raw_entries), path)
        return path

    def load(self, name: str = DEFAULT_NAME) -> Optional[ElementMetadata]:
        """
        Load previously saved metadata.

        Returns:
            ElementMetadata, or None if the file doesn't exist
        """
        path = self.path_for(name)
        if not path.exists():
            logger.info("No metadata file found at %s", path)
            return None

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return ElementMetadata.from_dict(data)
#   UTILITY:
#   - exists(name) -> bool
#   - clear() -> None
#       Delete all saved JSON files (for testing or reset).
#
    def exists(self, name: str = DEFAULT_NAME) -> bool:
        return self.path_for(name).exists()

    def clear(self) -> None:
        """
        Delete all saved metadata files.
        """
        for file in self.output_dir.glob("*.json"):
            file.unlink()
            logger.info("Deleted %s", file)
# FILE STRUCTURE:
# ---------------
#   metadata/
#   └── metadata.json   → {user_id, display_name, ..., raw_entries}
#
# =============================================
