"""
Pydantic schemas for page-building blocks.

Every block carries the shared section layout attributes (BaseBlock) plus its
own fields. `PayloadBlock` is the discriminated union on `blockType` that the
page renderer dispatches on.

Fields editors must fill are optional here: drafts are stored without them and
live preview renders drafts. "Required" is enforced on save by the block
definitions in `cms_site.blocks`.
"""
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field

from cms_site.schemas.base import PayloadSchema
from cms_site.schemas.cms import Button, Category, Media, Post


Size = Literal["sm", "md", "lg"]
PaddingOverride = Literal["", "none", "sm", "md", "lg"]
Background = Literal["default", "muted", "primary", "dark"]
CardVariant = Literal["elevated", "outlined", "filled"]
Align = Literal["center", "left"]
ContentWidth = Literal["narrow", "medium", "wide"]


class BaseBlock(PayloadSchema):
    """Section layout fields shared by all blocks."""
    id: Optional[str] = None
    block_name: Optional[str] = None
    size: Size = "md"
    padding_top: Optional[PaddingOverride] = None
    padding_bottom: Optional[PaddingOverride] = None
    background: Background = "default"


# ==================== Hero & CTA ====================

class Hero1Block(BaseBlock):
    block_type: Literal["hero1"]
    tagline: Optional[str] = None
    heading: Optional[str] = None
    description: Optional[str] = None
    align: Align = "center"
    content_width: ContentWidth = "medium"
    buttons: List[Button] = Field(default_factory=list)
    media: Optional[Union[Media, str]] = None


class CTA1Block(BaseBlock):
    block_type: Literal["cta1"]
    heading: Optional[str] = None
    description: Optional[str] = None
    align: Align = "center"
    buttons: List[Button] = Field(default_factory=list)
    background: Background = "primary"


class CTA2Block(BaseBlock):
    block_type: Literal["cta2"]
    heading: Optional[str] = None
    description: Optional[str] = None
    image: Optional[Union[Media, str]] = None
    reverse: bool = False
    vertical_align: Literal["start", "center", "end"] = "center"
    buttons: List[Button] = Field(default_factory=list)
    background: Background = "muted"


# ==================== Grids ====================

class FeatureItem(PayloadSchema):
    icon: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class Feature1Block(BaseBlock):
    block_type: Literal["feature1"]
    title: Optional[str] = None
    subtitle: Optional[str] = None
    features: List[FeatureItem] = Field(default_factory=list)
    columns: str = "3"
    card_variant: CardVariant = "outlined"
    center_heading: bool = True
    center_cards: bool = True


class StatItem(PayloadSchema):
    value: Optional[str] = None
    label: Optional[str] = None


class Stats1Block(BaseBlock):
    block_type: Literal["stats1"]
    title: Optional[str] = None
    subtitle: Optional[str] = None
    stats: List[StatItem] = Field(default_factory=list)
    columns: str = "4"
    centered: bool = True


class TeamMember(PayloadSchema):
    name: Optional[str] = None
    role: Optional[str] = None
    image: Optional[Union[Media, str]] = None
    bio: Optional[str] = None


class Team1Block(BaseBlock):
    block_type: Literal["team1"]
    title: Optional[str] = None
    subtitle: Optional[str] = None
    members: List[TeamMember] = Field(default_factory=list)
    columns: str = "4"
    avatar_size: Literal["md", "lg", "xl"] = "xl"
    centered: bool = True


# ==================== Content ====================

class Layout1Block(BaseBlock):
    block_type: Literal["layout1"]
    tagline: Optional[str] = None
    heading: Optional[str] = None
    description: Optional[str] = None
    content_text: Any = None  # Lexical rich text
    media_type: Literal["image", "code"] = "image"
    image: Optional[Union[Media, str]] = None
    code_block: Optional[str] = None
    reverse: bool = False
    buttons: List[Button] = Field(default_factory=list)


class SectionBlock(BaseBlock):
    block_type: Literal["section"]
    content: Any = None  # Lexical rich text
    center_content: bool = True
    max_width: ContentWidth = "narrow"


# ==================== Blog ====================

class Blog1Block(BaseBlock):
    block_type: Literal["blog1"]
    title: Optional[str] = None
    subtitle: Optional[str] = None
    post_source: Literal["latest", "category", "specific"] = "latest"
    category: Optional[Union[Category, str]] = None
    posts: List[Union[Post, str]] = Field(default_factory=list)
    limit: int = 6
    columns: str = "3"
    card_variant: CardVariant = "elevated"
    center_heading: bool = False


class CategoryGrid1Block(BaseBlock):
    block_type: Literal["categoryGrid1"]
    title: Optional[str] = None
    subtitle: Optional[str] = None
    category_source: Literal["all", "specific"] = "all"
    categories: List[Union[Category, str]] = Field(default_factory=list)
    show_post_count: bool = True
    columns: str = "2"
    card_variant: CardVariant = "outlined"
    center_heading: bool = False


# ==================== FAQ ====================

class FaqItem(PayloadSchema):
    question: Optional[str] = None
    answer: Optional[str] = None


class FaqBottomCta(PayloadSchema):
    heading: str = "Still have questions?"
    description: Optional[str] = None
    buttons: List[Button] = Field(default_factory=list)


class FAQ1Block(BaseBlock):
    block_type: Literal["faq1"]
    title: str = "FAQs"
    subtitle: Optional[str] = None
    items: List[FaqItem] = Field(default_factory=list)
    show_bottom_cta: bool = True
    bottom_cta: Optional[FaqBottomCta] = None
    center_heading: bool = True
    max_width: Literal["small", "medium", "large"] = "medium"
    default_open_first: bool = False
    allow_multiple_open: bool = False


PayloadBlock = Annotated[
    Union[
        Hero1Block,
        CTA1Block,
        CTA2Block,
        Feature1Block,
        Layout1Block,
        Stats1Block,
        Team1Block,
        SectionBlock,
        Blog1Block,
        CategoryGrid1Block,
        FAQ1Block,
    ],
    Field(discriminator="block_type"),
]
