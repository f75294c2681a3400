"""Plain text email newsletter following the TEN standard."""

from __future__ import annotations

from attrs import define, field

from ..config import DEFAULT_CONFIG, TenConfig
from .types import SectionList


@define(slots=True)
class Newsletter:
    """Plain text email newsletter following the TEN standard.

    Attributes:
        config: Configuration shared by the rendering of every part.
        title: Newsletter title.
        strapline: Optional strapline shown below the title.
        introduction: Optional introduction, which may contain markup. It
            appears between the contents and the first section.
        include_contents: Whether to generate a contents listing.
        sections: Ordered sections of the newsletter.
    """

    config: TenConfig = field(
        default=DEFAULT_CONFIG, kw_only=True, repr=False, eq=False
    )
    title: str = field(default="", converter=lambda v: v or "")
    strapline: str = field(default="", converter=lambda v: v or "")
    introduction: str = field(default="", converter=lambda v: v or "")
    include_contents: bool = True
    sections: SectionList = field(factory=list, repr=False)
