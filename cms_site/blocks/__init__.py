# Block schema catalog
from cms_site.blocks.fields import BlockDefinition
from cms_site.blocks.hero import HERO1_BLOCK
from cms_site.blocks.cta import CTA1_BLOCK, CTA2_BLOCK
from cms_site.blocks.grids import FEATURE1_BLOCK, STATS1_BLOCK, TEAM1_BLOCK
from cms_site.blocks.content import LAYOUT1_BLOCK, SECTION_BLOCK
from cms_site.blocks.blog import BLOG1_BLOCK, CATEGORY_GRID1_BLOCK
from cms_site.blocks.faq import FAQ1_BLOCK

# Order is the order editors see in the page builder
ALL_BLOCKS = [
    HERO1_BLOCK,
    CTA1_BLOCK,
    CTA2_BLOCK,
    FEATURE1_BLOCK,
    LAYOUT1_BLOCK,
    STATS1_BLOCK,
    TEAM1_BLOCK,
    SECTION_BLOCK,
    BLOG1_BLOCK,
    CATEGORY_GRID1_BLOCK,
    FAQ1_BLOCK,
]

_BLOCKS_BY_SLUG = {block.slug: block for block in ALL_BLOCKS}


def get_block(slug: str) -> BlockDefinition:
    """Look up a block definition by its type tag. Raises KeyError if unknown."""
    return _BLOCKS_BY_SLUG[slug]


__all__ = [
    "ALL_BLOCKS",
    "get_block",
    "HERO1_BLOCK",
    "CTA1_BLOCK",
    "CTA2_BLOCK",
    "FEATURE1_BLOCK",
    "LAYOUT1_BLOCK",
    "STATS1_BLOCK",
    "TEAM1_BLOCK",
    "SECTION_BLOCK",
    "BLOG1_BLOCK",
    "CATEGORY_GRID1_BLOCK",
    "FAQ1_BLOCK",
]
