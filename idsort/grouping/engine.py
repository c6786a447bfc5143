"""Groups a batch of classified images into per-person clusters.

Pass 1 routes each image, in input order, by the first signal available:
a. its extracted identity (license fronts only),
b. an identifier derived from its filename,
c. a fuzzy match against the filenames already in a cluster,
d. the default cluster.

Pass 2 unions clusters proven to hold the same person: clusters whose identity
records carry the same first and last name, and the cluster named after a
license front's filename with the cluster of that front's identity.

Pass 3 names each cluster after its identity record, if any, and renders the
text summary.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from idsort.extraction.models import IdentityRecord
from idsort.filenames.identifier import IdentifierDeriver
from idsort.filenames.roles import Role
from idsort.filenames.similarity import SimilarityMatcher
from idsort.filenames.vocabulary import base_name
from idsort.grouping.exceptions import GroupingInvariantError
from idsort.grouping.models import (
    DEFAULT_CLUSTER_KEY,
    DEFAULT_CLUSTER_NAME,
    Cluster,
    ClusterMap,
)
from idsort.grouping.summary import render_summary
from idsort.logging.logger import Log
from idsort.processor.models import ImageRecord


def identity_key(identity: IdentityRecord) -> str:
    return re.sub(r"\s+", "_", f"{identity.first_name}_{identity.last_name}".lower())


def display_name(text: str) -> str:
    """``john_smith`` or ``JOHN SMITH`` -> ``John Smith``."""
    return " ".join(word.capitalize() for word in re.split(r"[\s_]+", text) if word)


class _KeyUnion:
    """Union-find over cluster keys.

    The root of a set is its identity-bearing cluster when there is one,
    otherwise the earliest-created cluster.
    """

    def __init__(self, keys: list[str], identified: set[str]) -> None:
        self._parent = {key: key for key in keys}
        self._rank = {key: (0 if key in identified else 1, i) for i, key in enumerate(keys)}

    def __contains__(self, key: str) -> bool:
        return key in self._parent

    def find(self, key: str) -> str:
        while self._parent[key] != key:
            self._parent[key] = self._parent[self._parent[key]]
            key = self._parent[key]
        return key

    def union(self, a: str, b: str) -> None:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        winner, loser = sorted((root_a, root_b), key=self._rank.__getitem__)
        self._parent[loser] = winner


class GroupingEngine:
    """Builds the final cluster map for a fully processed batch.

    Single threaded; the engine is the only writer of the map it returns.
    """

    def __init__(
        self,
        deriver: IdentifierDeriver | None = None,
        matcher: SimilarityMatcher | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._deriver = deriver or IdentifierDeriver()
        self._matcher = matcher or SimilarityMatcher()
        self._clock = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def group(self, images: list[ImageRecord]) -> ClusterMap:
        Log.info(f"Starting to group {len(images)} images")
        clusters = ClusterMap()
        # filename-derived identifier -> identity keys of the fronts it came from
        aliases: dict[str, set[str]] = {}

        for image in images:
            self._assign(image, clusters, aliases)
        self.reconcile(clusters, aliases)
        self._finalize(clusters)
        self._verify_partition(images, clusters)

        Log.info(
            "Final groups: "
            + ", ".join(f"{c.key}: {len(c.images)} images" for c in clusters)
        )
        return clusters

    # ------------------------------------------------------------------
    # Pass 1 - assignment
    # ------------------------------------------------------------------

    def _assign(
        self,
        image: ImageRecord,
        clusters: ClusterMap,
        aliases: dict[str, set[str]],
    ) -> None:
        if image.identity is not None and image.has_identity and image.role is Role.FRONT:
            key = identity_key(image.identity)
            derived = self._deriver.derive(image.filename)
            if derived:
                aliases.setdefault(derived, set()).add(key)
            cluster = clusters.get_or_create(key, display_name(image.identity.full_name))
            cluster.add(image)
            Log.debug(f"Grouped by OCR data: {image.filename} -> {cluster.name}")
            return

        derived = self._deriver.derive(image.filename)
        if derived:
            cluster = clusters.get_or_create(derived, display_name(derived))
            cluster.add(image)
            Log.debug(f"Grouped by filename pattern: {image.filename} -> {cluster.name}")
            return

        similar = self._find_similar(image, clusters)
        if similar is not None:
            similar.add(image)
            Log.debug(f"Grouped by similarity: {image.filename} -> {similar.name}")
            return

        clusters.get_or_create(DEFAULT_CLUSTER_KEY, DEFAULT_CLUSTER_NAME).add(image)
        Log.debug(f"No group found for {image.filename}, adding to ungrouped")

    def _find_similar(self, image: ImageRecord, clusters: ClusterMap) -> Cluster | None:
        stem = base_name(image.filename)
        for cluster in clusters:
            if cluster.is_default:
                continue
            if any(
                self._matcher.similar(stem, base_name(member.filename))
                for member in cluster.images
            ):
                return cluster
        return None

    # ------------------------------------------------------------------
    # Pass 2 - reconciliation
    # ------------------------------------------------------------------

    def reconcile(
        self,
        clusters: ClusterMap,
        aliases: dict[str, set[str]] | None = None,
    ) -> None:
        """Merge clusters proven to hold the same person, in place.

        After the call an absorbed cluster's key no longer resolves in
        *clusters*; its members belong to the surviving cluster.
        """
        keys = [key for key in clusters.keys() if key != DEFAULT_CLUSTER_KEY]
        identified = {key for key in keys if clusters[key].identity_images()}
        union = _KeyUnion(keys, identified)

        named: list[tuple[IdentityRecord, str]] = []
        for key in keys:
            for image in clusters[key].identity_images():
                record = image.identity
                if record is None:
                    continue
                owner = next((k for seen, k in named if seen.same_person(record)), None)
                if owner is None:
                    named.append((record, key))
                elif owner != key:
                    union.union(owner, key)

        for derived, owners in (aliases or {}).items():
            if len(owners) != 1:
                Log.debug(f"Filename identifier {derived} is shared by {sorted(owners)}, not linking")
                continue
            (owner,) = owners
            # Identity clusters only merge on matching names.
            if derived == owner or derived not in union or derived in identified:
                continue
            union.union(owner, derived)

        for key in keys:
            root = union.find(key)
            if root == key:
                continue
            clusters[root].absorb(clusters[key])
            clusters.remove(key)
            Log.info(f"Merged groups: {root} and {key}", survivor=root, absorbed=key)

    # ------------------------------------------------------------------
    # Pass 3 - finalize
    # ------------------------------------------------------------------

    def _finalize(self, clusters: ClusterMap) -> None:
        for cluster in clusters:
            source = self._identity_source(cluster)
            if source is None or source.identity is None:
                continue
            cluster.name = display_name(source.identity.full_name)
            cluster.text_data = render_summary(source.identity, self._clock())

    @staticmethod
    def _identity_source(cluster: Cluster) -> ImageRecord | None:
        candidates = cluster.identity_images()
        if not candidates:
            return None
        return next((i for i in candidates if i.role is Role.FRONT), candidates[0])

    @staticmethod
    def _verify_partition(images: list[ImageRecord], clusters: ClusterMap) -> None:
        expected = sorted(image.id for image in images)
        actual = sorted(image.id for cluster in clusters for image in cluster.images)
        if expected != actual:
            raise GroupingInvariantError(
                f"Clusters hold {len(actual)} images for {len(expected)} inputs"
            )
