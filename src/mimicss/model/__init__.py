"""mimicss model layer -- public type re-exports."""

from mimicss.model.artifact import Artifact, ArtifactKind, classify_artifact
from mimicss.model.classmap import ClassMap
from mimicss.model.usage import UsageIndex, is_partial_token, split_class_list

__all__ = [
    # usage
    "UsageIndex",
    "split_class_list",
    "is_partial_token",
    # class map
    "ClassMap",
    # artifact
    "Artifact",
    "ArtifactKind",
    "classify_artifact",
]
