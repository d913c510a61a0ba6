from modified import logconfig
from modified.interfaces import IDeref, IModified, IResettable
from modified.resettable import Resettable
from modified.synchronized import Synchronized
from modified.value import Modified, MutRef

logconfig.configure_root_logger()

__all__ = [
    "IDeref",
    "IModified",
    "IResettable",
    "Modified",
    "MutRef",
    "Resettable",
    "Synchronized",
]
