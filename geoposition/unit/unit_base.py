"""Family bookkeeping for typed physical quantities.

Every quantity class belongs to a family (angle, length). The family is
identified by its ROOT class, which is resolved automatically from the
first ancestor flagged with ``IS_FAMILY_ROOT``. Arithmetic and comparisons
are only allowed inside one family, so a bearing can never be added to a
distance by accident.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class NauticalMile(Length):
    ...     pass  # ROOT is Length
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all quantity types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the quantity family.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class that defines a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Reject operations between different quantity families.

        Args:
            unit_type: Type of the other operand.

        Raises:
            TypeError: If ``unit_type`` is not a quantity of the same family.
        """
        root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not root:
            msg = f"Cannot combine {cls.__name__} with {unit_type.__name__}"
            raise TypeError(msg)
