"""Configuration models (Pydantic classes)."""

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import INCLUDE_DIR_NAMED_TAG, INCLUDE_TAG


class LoaderConfig(BaseModel):
    """
    Document loading configuration.
    - Loaded from loader.yaml (optional; defaults apply otherwise)
    - Consumed by application.loading.load_document
    """

    include_tag: str = Field(
        default=INCLUDE_TAG,
        description="Tag whose scalar value names a file to splice in place of the node.",
    )
    include_dir_named_tag: str = Field(
        default=INCLUDE_DIR_NAMED_TAG,
        description="Tag whose scalar value names a directory to splice in as a name -> content mapping.",
    )

    # Pass selection flags
    resolve_includes: bool = Field(
        default=True,
        description="If true, run the single-file include pass.",
    )
    resolve_dir_includes: bool = Field(
        default=True,
        description="If true, run the named-directory include pass (after the single-file pass).",
    )

    @model_validator(mode="after")
    def _validate(self) -> "LoaderConfig":
        self.include_tag = self.include_tag.strip()
        self.include_dir_named_tag = self.include_dir_named_tag.strip()

        if not self.include_tag or not self.include_dir_named_tag:
            raise ValueError("include tags must be non-empty strings")
        if self.include_tag == self.include_dir_named_tag:
            raise ValueError(f"include_tag and include_dir_named_tag must differ, both are {self.include_tag!r}")

        return self
