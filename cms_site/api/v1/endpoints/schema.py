"""Read-only introspection of the block catalog, collections and globals."""
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, status

from cms_site.blocks import ALL_BLOCKS, get_block
from cms_site.collections import ALL_COLLECTIONS, ALL_GLOBALS

router = APIRouter()


def _dump(definition) -> Dict[str, Any]:
    # Hooks and custom validators are excluded from serialization
    return definition.model_dump(mode="json", exclude_none=True)


@router.get("/blocks")
async def list_blocks() -> List[Dict[str, Any]]:
    """Every block type in page-builder order."""
    return [_dump(block) for block in ALL_BLOCKS]


@router.get("/blocks/{slug}")
async def read_block(slug: str) -> Dict[str, Any]:
    try:
        block = get_block(slug)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown block type '{slug}'")
    return _dump(block)


@router.get("/collections")
async def list_collections() -> Dict[str, List[Dict[str, Any]]]:
    """Collections (with nested block catalog for pages) and globals."""
    return {
        "collections": [_dump(collection) for collection in ALL_COLLECTIONS],
        "globals": [_dump(global_) for global_ in ALL_GLOBALS],
    }
