from supercoll.common import MISSING, Missing
from supercoll.map import SuperMap
from supercoll.set import SuperSet
from supercoll.types import (
    MapKeyMapper,
    MapLike,
    MapMapper,
    MapPredicate,
    MapReducer,
    SetLike,
    SetMapper,
    SetPredicate,
    SetReducer,
)

__all__ = [
    "MISSING",
    "MapKeyMapper",
    "MapLike",
    "MapMapper",
    "MapPredicate",
    "MapReducer",
    "Missing",
    "SetLike",
    "SetMapper",
    "SetPredicate",
    "SetReducer",
    "SuperMap",
    "SuperSet",
]
