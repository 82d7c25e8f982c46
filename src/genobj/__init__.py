# pyright: reportUnusedImport=false
from genobj.sentinel import FalseType, false, is_false
from genobj.registry import AllowListRegistry
from genobj.container import Container, container, get_registry
from genobj.accessor import Accessor, AccessorKind, classify
from genobj.generic import GenericObject, GenericType
