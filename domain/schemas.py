"""Pydantic records for the example site document (see examples/site.yaml)."""

from pydantic import BaseModel, Field


class Owner(BaseModel):
    """Who runs the site."""

    name: str
    email: str | None = None


class Service(BaseModel):
    """One service, after its file name has been promoted into `name`."""

    name: str = Field(..., description="Service name (the include file stem).")
    port: int = Field(..., description="Listening port.")
    routes: list[str] = Field(
        default_factory=list,
        description="HTTP routes served. A single bare route is accepted in YAML.",
    )
    tls: bool = Field(default=False, description="Whether the service terminates TLS.")


class Site(BaseModel):
    """Top-level site document."""

    name: str
    owner: Owner | None = None
    hosts: list[str] = Field(
        default_factory=list,
        description="Host names; nested lists in YAML are flattened.",
    )
    services: list[Service] = Field(default_factory=list)
