"""
Branch name model for relnames.

Release branches come in six shapes. Each shape is a :class:`_ShapeRule`
(pattern, decoder, encoder) and the rules are tried in ``_RULES`` order; the
first structural match decides the shape:

============== ===========================================================
Shape          Example
============== ===========================================================
AUTORELEASE    ``release-v1.2.3``, ``release-my-lib-v1.2.3`` (releasetool)
COMPONENT      ``release-please--branches--main--components--my-lib``
GROUP          ``release-please--branches--main--groups--frontend``
DEFAULT        ``release-please--branches--main``
V12_COMPONENT  ``release-please/branches/main/components/my-lib``
V12_DEFAULT    ``release-please/branches/main``
============== ===========================================================

COMPONENT and GROUP come before DEFAULT because the DEFAULT pattern also
matches them. The V12 shapes are deprecated since git treats ``/`` as a
directory separator, but existing branches still need to be recognised.
"""

from __future__ import annotations

import re
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, NamedTuple, Optional

from relnames.constants import (
    AUTORELEASE_BRANCH_PATTERN,
    COMPONENT_BRANCH_PATTERN,
    DEFAULT_BRANCH_PATTERN,
    GROUP_BRANCH_PATTERN,
    RESERVED_BRANCH_PREFIX,
    RESERVED_BRANCHES_PREFIX,
    V12_COMPONENT_BRANCH_PATTERN,
    V12_DEFAULT_BRANCH_PATTERN,
)
from relnames.models.version import Version
from relnames.utils.logger import get_logger

if TYPE_CHECKING:
    from relnames.core.version_format import VersionFormat

_logger = get_logger("models.branch_name")

_UNSAFE_BRANCH_CHARS = re.compile(r"[^\w\d]", re.ASCII)
_DASH_RUNS = re.compile(r"-+")


def safe_branch_name(name: str) -> str:
    """
    Make ``name`` safe to embed in a branch name.

    Every character outside ``[A-Za-z0-9_]`` becomes ``-`` and runs of ``-``
    collapse to one, so the result can never contain the ``--`` delimiters
    used by the branch grammars.

    Example:
        >>> safe_branch_name("a/b//c")
        'a-b-c'
    """
    return _DASH_RUNS.sub("-", _UNSAFE_BRANCH_CHARS.sub("-", name))


class BranchShape(str, Enum):
    """The structural forms a release branch name can take."""

    AUTORELEASE = "autorelease"
    COMPONENT = "component"
    GROUP = "group"
    DEFAULT = "default"
    V12_COMPONENT = "v12-component"
    V12_DEFAULT = "v12-default"

    @property
    def is_deprecated(self) -> bool:
        return self in (BranchShape.V12_COMPONENT, BranchShape.V12_DEFAULT)


@dataclass(frozen=True)
class BranchName:
    """
    A release branch name.

    Only the fields meaningful for :attr:`shape` are set: AUTORELEASE carries
    ``version`` (and optionally ``component``), the others carry
    ``target_branch`` and, for COMPONENT, GROUP and V12_COMPONENT,
    ``component`` (the group name for GROUP).

    Attributes:
        shape: Which grammar the name follows.
        target_branch: Branch the release is made against.
        component: Component or group name.
        version: Release version (AUTORELEASE only).
        version_format: Dialect used to render ``version``.
    """

    shape: BranchShape
    target_branch: Optional[str] = None
    component: Optional[str] = None
    version: Optional[Version] = None
    version_format: Optional["VersionFormat"] = field(
        default=None, compare=False, repr=False
    )

    # ------------------------------------------------------------------
    # Recognition & parsing
    # ------------------------------------------------------------------

    @staticmethod
    def is_release_please_branch(branch_name: str) -> bool:
        """
        Check whether ``branch_name`` follows any release branch grammar.

        Structural only: the version of an AUTORELEASE name is not decoded,
        so no version format is needed.
        """
        return _find_rule(branch_name) is not None

    @classmethod
    def parse(
        cls,
        branch_name: str,
        version_format: Optional["VersionFormat"] = None,
        logger: Optional[logging.Logger] = None,
    ) -> Optional["BranchName"]:
        """
        Parse a branch name.

        Args:
            branch_name: Raw branch name.
            version_format: Dialect for the version of AUTORELEASE names.
                Without it AUTORELEASE names do not parse.
            logger: Receives a warning if decoding a matched name fails.

        Returns:
            The branch name, or ``None`` if no grammar matches, the version of
            an AUTORELEASE name cannot be decoded, or decoding raised.
        """
        rule = _find_rule(branch_name)
        if rule is None:
            return None

        match = rule.pattern.fullmatch(branch_name)
        try:
            return rule.decode(match, version_format)
        except Exception:
            (logger or _logger).warning(
                "Error parsing branch name: %s", branch_name, exc_info=True
            )
            return None

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    @classmethod
    def of_version(
        cls, version: Version, version_format: "VersionFormat"
    ) -> "BranchName":
        """Build ``release-v<version>``."""
        return cls(
            BranchShape.AUTORELEASE,
            version=version,
            version_format=version_format,
        )

    @classmethod
    def of_component_version(
        cls,
        branch_prefix: str,
        version: Version,
        version_format: "VersionFormat",
    ) -> "BranchName":
        """Build ``release-<branch_prefix>-v<version>``."""
        return cls(
            BranchShape.AUTORELEASE,
            component=branch_prefix,
            version=version,
            version_format=version_format,
        )

    @classmethod
    def of_target_branch(cls, target_branch: str) -> "BranchName":
        return cls(BranchShape.DEFAULT, target_branch=target_branch)

    @classmethod
    def of_component_target_branch(
        cls, component: str, target_branch: str
    ) -> "BranchName":
        return cls(
            BranchShape.COMPONENT,
            target_branch=target_branch,
            component=component,
        )

    @classmethod
    def of_group_target_branch(cls, group: str, target_branch: str) -> "BranchName":
        """Build a GROUP name; ``group`` is passed through :func:`safe_branch_name`."""
        return cls(
            BranchShape.GROUP,
            target_branch=target_branch,
            component=safe_branch_name(group),
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return _RULES_BY_SHAPE[self.shape].encode(self)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable description of the branch name."""
        return {
            "name": str(self),
            "shape": self.shape.value,
            "deprecated": self.shape.is_deprecated,
            "target_branch": self.target_branch,
            "component": self.component,
            "version": str(self.version) if self.version is not None else None,
        }


# ---------------------------------------------------------------------------
# Shape rules
# ---------------------------------------------------------------------------


class _ShapeRule(NamedTuple):
    shape: BranchShape
    pattern: re.Pattern[str]
    decode: Callable[[re.Match[str], Optional["VersionFormat"]], Optional[BranchName]]
    encode: Callable[[BranchName], str]
    excluded_prefix: Optional[str] = None

    def matches(self, branch_name: str) -> bool:
        if self.excluded_prefix and branch_name.startswith(self.excluded_prefix):
            return False
        return self.pattern.fullmatch(branch_name) is not None


def _decode_autorelease(
    match: re.Match[str], version_format: Optional["VersionFormat"]
) -> Optional[BranchName]:
    if version_format is None:
        return None
    version = version_format.parse(match.group("version"))
    if version is None:
        return None
    return BranchName(
        BranchShape.AUTORELEASE,
        component=match.group("component") or None,
        version=version,
        version_format=version_format,
    )


def _encode_autorelease(branch: BranchName) -> str:
    if branch.version is not None and branch.version_format is not None:
        version = branch.version_format.format(branch.version)
    else:
        version = str(branch.version)
    if branch.component:
        return f"release-{branch.component}-v{version}"
    return f"release-v{version}"


def _target_decoder(shape: BranchShape, component_group: Optional[str] = None):
    """Build a decoder for the shapes keyed by target branch."""

    def decode(
        match: re.Match[str], _version_format: Optional["VersionFormat"]
    ) -> BranchName:
        return BranchName(
            shape,
            target_branch=match.group("branch"),
            component=match.group(component_group) if component_group else None,
        )

    return decode


_RULES = (
    _ShapeRule(
        BranchShape.AUTORELEASE,
        re.compile(AUTORELEASE_BRANCH_PATTERN, re.ASCII),
        _decode_autorelease,
        _encode_autorelease,
        excluded_prefix=RESERVED_BRANCHES_PREFIX,
    ),
    _ShapeRule(
        BranchShape.COMPONENT,
        re.compile(COMPONENT_BRANCH_PATTERN, re.ASCII),
        _target_decoder(BranchShape.COMPONENT, "component"),
        lambda b: (
            f"{RESERVED_BRANCH_PREFIX}--branches--{b.target_branch}"
            f"--components--{b.component}"
        ),
    ),
    _ShapeRule(
        BranchShape.GROUP,
        re.compile(GROUP_BRANCH_PATTERN, re.ASCII),
        _target_decoder(BranchShape.GROUP, "group"),
        lambda b: (
            f"{RESERVED_BRANCH_PREFIX}--branches--{b.target_branch}"
            f"--groups--{b.component}"
        ),
    ),
    _ShapeRule(
        BranchShape.DEFAULT,
        re.compile(DEFAULT_BRANCH_PATTERN, re.ASCII),
        _target_decoder(BranchShape.DEFAULT),
        lambda b: f"{RESERVED_BRANCH_PREFIX}--branches--{b.target_branch}",
    ),
    _ShapeRule(
        BranchShape.V12_COMPONENT,
        re.compile(V12_COMPONENT_BRANCH_PATTERN, re.ASCII),
        _target_decoder(BranchShape.V12_COMPONENT, "component"),
        lambda b: (
            f"{RESERVED_BRANCH_PREFIX}/branches/{b.target_branch}"
            f"/components/{b.component}"
        ),
    ),
    _ShapeRule(
        BranchShape.V12_DEFAULT,
        re.compile(V12_DEFAULT_BRANCH_PATTERN, re.ASCII),
        _target_decoder(BranchShape.V12_DEFAULT),
        lambda b: f"{RESERVED_BRANCH_PREFIX}/branches/{b.target_branch}",
    ),
)

_RULES_BY_SHAPE = {rule.shape: rule for rule in _RULES}


def _find_rule(branch_name: str) -> Optional[_ShapeRule]:
    return next((rule for rule in _RULES if rule.matches(branch_name)), None)
