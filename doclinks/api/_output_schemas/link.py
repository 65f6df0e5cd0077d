"""Output schemas for link commands."""

from pydantic import BaseModel, ConfigDict, Field

from ._base import BaseOutputSchema


class BrokenLinkEntry(BaseModel):
    """A single link whose target could not be resolved."""

    model_config = ConfigDict(extra="forbid")

    source_document: str = Field(..., description="Document containing the link")
    target: str = Field(..., description="Link target exactly as written")
    resolved_path: str = Field(..., description="Filesystem path the target was resolved to")
    line_number: int = Field(..., ge=1, description="1-based line of the link in the document")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for the link check command.

    Output structure:
    - errors: list[str] - fatal errors (unreadable docs root, bad config), empty list if none
    - warnings: list[str] - non-fatal notices
    - docs_root: str - documentation root that was scanned
    - documents_checked: int - number of markdown documents read
    - links_checked: int - number of links extracted and validated
    - broken_count: int - number of links that failed resolution
    - broken_links: list - one entry per broken link
    - is_valid: bool - True when no errors and no broken links
    """

    docs_root: str = Field(..., description="Documentation root that was scanned")
    documents_checked: int = Field(..., ge=0, description="Number of documents read")
    links_checked: int = Field(..., ge=0, description="Number of links validated")
    broken_count: int = Field(..., ge=0, description="Number of broken links")
    broken_links: list[BrokenLinkEntry] = Field(default_factory=list, description="Broken links in document order")
    is_valid: bool = Field(..., description="True when the tree has no broken links and no errors")
