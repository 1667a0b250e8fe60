"""
Tag name model for relnames.

Tags look like ``[<component><separator>][v]<version>``, for example
``v1.2.3``, ``1.2.3``, ``my-lib-v1.2.3`` or ``my-lib@1.2.3``. The separator
is any single non-alphanumeric character, so the component of a tag can be
extracted before the version dialect is known.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from relnames.constants import DEFAULT_TAG_SEPARATOR, TAG_PATTERN
from relnames.models.version import Version

if TYPE_CHECKING:
    from relnames.core.version_format import VersionFormat

_TAG_REGEX = re.compile(TAG_PATTERN, re.ASCII)


@dataclass(frozen=True)
class TagName:
    """
    A parsed or constructed tag name.

    Attributes:
        version: Version the tag points at.
        component: Optional component prefix.
        separator: Character between component and version.
        include_v: Whether the version is written with a leading ``v``.
    """

    version: Version
    component: Optional[str] = None
    separator: str = DEFAULT_TAG_SEPARATOR
    include_v: bool = True

    @staticmethod
    def extract_component(tag_name: str) -> Optional[str]:
        """
        Return the component of ``tag_name`` without parsing its version.

        Useful for choosing the version format of a component before calling
        :meth:`parse`.

        Args:
            tag_name: Raw tag text.

        Returns:
            The component, or ``None`` if the tag has none or is not
            tag-shaped.
        """
        match = _TAG_REGEX.fullmatch(tag_name)
        if match is None:
            return None
        return match.group("component")

    @classmethod
    def parse(
        cls,
        tag_name: str,
        version_format: VersionFormat,
    ) -> Optional["TagName"]:
        """
        Parse a tag name.

        Args:
            tag_name: Raw tag text.
            version_format: Dialect used to decode the version part.

        Returns:
            The tag, or ``None`` if the text is not tag-shaped or the version
            part is not valid in ``version_format``.
        """
        match = _TAG_REGEX.fullmatch(tag_name)
        if match is None:
            return None

        version = version_format.parse(match.group("version"))
        if version is None:
            return None

        separator = match.group("separator")
        return cls(
            version=version,
            component=match.group("component"),
            separator=separator if separator is not None else DEFAULT_TAG_SEPARATOR,
            include_v=bool(match.group("v")),
        )

    def __str__(self) -> str:
        v = "v" if self.include_v else ""
        if self.component:
            return f"{self.component}{self.separator}{v}{self.version}"
        return f"{v}{self.version}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable description of the tag."""
        return {
            "name": str(self),
            "component": self.component,
            "separator": self.separator if self.component else None,
            "include_v": self.include_v,
            "version": str(self.version),
        }
