"""Kernel layer - capability protocols and concrete computation types."""

from condkit.kernel.action import Action
from condkit.kernel.option import Option
from condkit.kernel.ports import Category, Monad, MonadPlus, MonadRec, Monoid
from condkit.kernel.result import Control, Done, Loop, Result
from condkit.kernel.trace import Evidence, EvidenceRecord, Trace
from condkit.kernel.transform import Transform

__all__ = [
    "Action",
    "Option",
    "Transform",
    "Control",
    "Result",
    "Loop",
    "Done",
    # Tracing
    "Trace",
    "Evidence",
    "EvidenceRecord",
    # Capabilities
    "Monad",
    "MonadPlus",
    "MonadRec",
    "Category",
    "Monoid",
]
