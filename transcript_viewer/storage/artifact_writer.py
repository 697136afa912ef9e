"""Export artifact storage"""

import logging
import tempfile
from pathlib import Path
from typing import Union

from ..models import ExportArtifact

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Write export artifacts to files"""

    @staticmethod
    def write(artifact: ExportArtifact, output_dir: Union[str, Path]) -> Path:
        """Write an artifact under its suggested filename

        Args:
            artifact: ExportArtifact to write
            output_dir: Directory to write into (created if missing)

        Returns:
            Path of the written file

        Raises:
            IOError: If file cannot be written
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / artifact.filename

        # Atomic write using temporary file
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=output_dir, prefix=".tmp_", suffix=Path(artifact.filename).suffix
            )

            try:
                with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                    f.write(artifact.content)

                # Rename temp file to final path (atomic on most systems)
                Path(temp_path).replace(output_path)

            except Exception:
                Path(temp_path).unlink(missing_ok=True)
                raise

        except Exception as e:
            raise IOError(f"Failed to write output file: {str(e)}")

        logger.info(f"Wrote {output_path.absolute()}")
        return output_path
