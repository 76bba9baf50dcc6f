"""
Writes generated artifacts to disk using the conventional Rails layout.
"""

from pathlib import Path

from modelgen.core.models import GeneratedArtifacts
from modelgen.observability.logger import get_logger
from modelgen.utils.naming import underscore

logger = get_logger(__name__)

MODELS_DIR = Path("app") / "models"
TESTS_DIR = Path("test") / "unit"
STAGING_SUFFIX = ".tmp"


class ArtifactWriter:
    """
    Persists model and test sources under an output directory.

    Layout:
        <output_dir>/app/models/<class>.rb
        <output_dir>/test/unit/<class>_test.rb
    """

    def __init__(self, output_dir: str | Path, overwrite: bool = True):
        """
        Initialize the writer.

        Args:
            output_dir: Root directory (usually a Rails application root)
            overwrite: Whether existing files may be replaced
        """
        self.output_dir = Path(output_dir)
        self.overwrite = overwrite

    def paths_for(self, class_name: str) -> tuple[Path, Path]:
        stem = underscore(class_name)
        return (
            self.output_dir / MODELS_DIR / f"{stem}.rb",
            self.output_dir / TESTS_DIR / f"{stem}_test.rb",
        )

    def write(self, artifacts: GeneratedArtifacts) -> tuple[Path, Path]:
        """
        Write both artifacts.

        Args:
            artifacts: Generated model and test sources

        Returns:
            (model_path, test_path)

        Raises:
            FileExistsError: If a target exists and overwrite is disabled
        """
        model_path, test_path = self.paths_for(artifacts.class_name)

        if not self.overwrite:
            for path in (model_path, test_path):
                if path.exists():
                    raise FileExistsError(f"Refusing to overwrite existing file: {path}")

        # A failed write leaves neither target touched
        targets = ((model_path, artifacts.model_source), (test_path, artifacts.test_source))
        staged: list[Path] = []
        try:
            for path, content in targets:
                path.parent.mkdir(parents=True, exist_ok=True)
                staging_path = path.with_name(path.name + STAGING_SUFFIX)
                staged.append(staging_path)
                staging_path.write_text(content, encoding="utf-8")
        except OSError:
            for staging_path in staged:
                staging_path.unlink(missing_ok=True)
            raise

        for (path, content), staging_path in zip(targets, staged):
            staging_path.replace(path)
            logger.info(f"Wrote {path}", extra={"path": str(path), "bytes": len(content)})

        return model_path, test_path
