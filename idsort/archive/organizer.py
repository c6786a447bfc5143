import re
from collections.abc import Iterable
from pathlib import PurePath
from typing import ClassVar

from idsort.archive.base import BaseArchiveWriter
from idsort.filenames.roles import Role
from idsort.grouping.models import Cluster
from idsort.logging.logger import Log
from idsort.processor.models import ImageRecord


class ArchiveOrganizer:
    """Lays clusters out as one folder per person.

    Folder: display name stripped of anything but word characters, spaces
    and hyphens. Images are written front, back, selfie, unknown and renamed
    ``<Name>_DL_Front.<ext>`` etc.; unknown-role images keep their filename.
    A non-empty summary is written as ``<Name>_info.txt``. Names that collide,
    ignoring case, get a numeric suffix so no image is overwritten on any
    filesystem.
    """

    ROLE_SUFFIXES: ClassVar[dict[Role, str]] = {
        Role.FRONT: "DL_Front",
        Role.BACK: "DL_Back",
        Role.SELFIE: "Selfie",
    }
    FALLBACK_FOLDER: ClassVar[str] = "Unnamed"

    def write(self, clusters: Iterable[Cluster], writer: BaseArchiveWriter) -> int:
        """Write every cluster into *writer*; returns the number of images written."""
        used_folders: set[str] = set()
        written = 0
        for cluster in clusters:
            folder = self._unique(self.folder_name(cluster.name), used_folders)
            writer.add_folder(folder)
            written += self._write_cluster(cluster, folder, writer)
        Log.info(f"Archived {written} images into {len(used_folders)} folders")
        return written

    def folder_name(self, display_name: str) -> str:
        return re.sub(r"[^\w\s-]", "", display_name).strip() or self.FALLBACK_FOLDER

    def _write_cluster(self, cluster: Cluster, folder: str, writer: BaseArchiveWriter) -> int:
        prefix = re.sub(r"\s+", "_", folder)
        used_names: set[str] = set()

        for image in cluster.ordered_images():
            name = self._unique(self._image_name(image, prefix), used_names)
            writer.add_file(folder, name, image.content)

        if cluster.text_data:
            info_name = self._unique(f"{prefix}_info.txt", used_names)
            writer.add_file(folder, info_name, cluster.text_data)

        Log.debug(f"Wrote {len(cluster.images)} images to {folder}")
        return len(cluster.images)

    def _image_name(self, image: ImageRecord, prefix: str) -> str:
        suffix = self.ROLE_SUFFIXES.get(image.role or Role.UNKNOWN)
        if suffix is None:
            return image.filename
        extension = PurePath(image.filename).suffix
        return f"{prefix}_{suffix}{extension}"

    @staticmethod
    def _unique(name: str, used: set[str]) -> str:
        """Return *name*, suffixed if needed; *used* holds casefolded names."""
        candidate = name
        counter = 2
        while candidate.casefold() in used:
            path = PurePath(name)
            candidate = f"{path.stem}_{counter}{path.suffix}"
            counter += 1
        used.add(candidate.casefold())
        return candidate
