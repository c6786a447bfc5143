from collections.abc import Iterator
from dataclasses import dataclass, field

from idsort.filenames.roles import ROLE_ORDER, Role
from idsort.processor.models import ImageRecord

DEFAULT_CLUSTER_KEY = "__ungrouped__"
DEFAULT_CLUSTER_NAME = "Ungrouped Images"


@dataclass
class Cluster:
    """Images attributed to one person, plus the derived name and summary."""

    key: str
    name: str
    images: list[ImageRecord] = field(default_factory=list)
    text_data: str = ""

    @property
    def is_default(self) -> bool:
        return self.key == DEFAULT_CLUSTER_KEY

    def add(self, image: ImageRecord) -> None:
        self.images.append(image)

    def absorb(self, other: "Cluster") -> None:
        self.images.extend(other.images)
        other.images = []

    def identity_images(self) -> list[ImageRecord]:
        return [image for image in self.images if image.has_identity]

    def ordered_images(self) -> list[ImageRecord]:
        """Members ordered front, back, selfie, unknown; stable within a role."""
        return sorted(
            self.images,
            key=lambda image: ROLE_ORDER[image.role or Role.UNKNOWN],
        )


class ClusterMap:
    """Clusters by key, in creation order."""

    def __init__(self) -> None:
        self._clusters: dict[str, Cluster] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._clusters

    def __getitem__(self, key: str) -> Cluster:
        return self._clusters[key]

    def __iter__(self) -> Iterator[Cluster]:
        return iter(list(self._clusters.values()))

    def __len__(self) -> int:
        return len(self._clusters)

    def get(self, key: str) -> Cluster | None:
        return self._clusters.get(key)

    def keys(self) -> list[str]:
        return list(self._clusters)

    def get_or_create(self, key: str, name: str) -> Cluster:
        cluster = self._clusters.get(key)
        if cluster is None:
            cluster = Cluster(key=key, name=name)
            self._clusters[key] = cluster
        return cluster

    def remove(self, key: str) -> Cluster:
        return self._clusters.pop(key)

    def total_images(self) -> int:
        return sum(len(cluster.images) for cluster in self._clusters.values())
