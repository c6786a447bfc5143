from idsort.grouping.engine import GroupingEngine
from idsort.grouping.models import DEFAULT_CLUSTER_KEY, Cluster, ClusterMap

__all__ = ["DEFAULT_CLUSTER_KEY", "Cluster", "ClusterMap", "GroupingEngine"]
