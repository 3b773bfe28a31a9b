"""Files copied to the destination as-is, without being read as resources."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from folio.exceptions import SourceReadError

if TYPE_CHECKING:
    from folio.collection import Collection

logger = logging.getLogger(__name__)


class StaticFile:
    """An asset such as an image or stylesheet found in a collection folder.

    Files under ``pages`` keep their path relative to the source directory;
    files of other collections are copied below a folder named after the
    collection label.
    """

    def __init__(self, collection: Collection, path: Path) -> None:
        self.collection = collection
        self.path = path

    @property
    def relative_path(self) -> PurePosixPath:
        return PurePosixPath(self.path.relative_to(self.collection.site.source).as_posix())

    @property
    def url(self) -> str:
        relative = PurePosixPath(self.path.relative_to(self.collection.directory).as_posix())
        if self.collection.label != "pages":
            relative = PurePosixPath(self.collection.label) / relative
        return f"/{relative}"

    @property
    def destination_path(self) -> Path:
        return self.collection.site.in_dest_dir(self.url)

    def write(self) -> Path:
        target = self.destination_path
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Copying: %s -> %s", self.path, target)
        try:
            shutil.copy(self.path, target)
        except OSError as exc:
            raise SourceReadError(str(self.path), str(exc)) from exc
        return target

    def __repr__(self) -> str:
        return f"<StaticFile {self.relative_path}>"
