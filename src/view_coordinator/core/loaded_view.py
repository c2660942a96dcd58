"""Domain entity for a materialized view."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LoadedView:
    """A display tree paired with the controller that drives it.

    Attributes:
        root: Opaque display-tree handle (a QWidget for the Qt loader).
        controller: The ViewContract instance created alongside ``root``.
    """

    root: Any
    controller: Any
