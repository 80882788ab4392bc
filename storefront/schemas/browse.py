"""Browse view response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.catalog import CatalogEntry, CategoryNode, Layout, SortKey


class BrowseState(BaseModel):
    """Echo of the browse controls a view was derived from."""

    model_config = ConfigDict(populate_by_name=True)

    selected_path: list[str] = Field(default_factory=list, alias="selectedPath")
    query: str = ""
    category_filter: str = Field(default="", alias="categoryFilter")
    sort_key: SortKey = Field(default="recent", alias="sort")
    layout: Layout = "grid"


class CatalogView(BaseModel):
    """Everything a catalog page renders for one browse state."""

    model_config = ConfigDict(populate_by_name=True)

    state: BrowseState
    tree: list[CategoryNode] = Field(default_factory=list, description="Full category forest")
    categories: list[CategoryNode] = Field(
        default_factory=list,
        description="Categories at the selected level",
    )
    is_leaf_level: bool = Field(default=False, alias="isLeafLevel")
    entries: list[CatalogEntry] = Field(default_factory=list, description="Entries to display")
    category_options: list[str] = Field(
        default_factory=list,
        alias="categoryOptions",
        description="Top-level categories for the filter selector",
    )
    total_entries: int = Field(default=0, alias="totalEntries", description="Size of the snapshot")
