from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogItem(BaseModel):
    """A broth or protein as exposed by the listing endpoints (camelCase on the wire)."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    name: str
    description: str = ""
    price: float = 0.0
    image_inactive: str = ""
    image_active: str = ""


class BrothRead(CatalogItem):
    pass


class ProteinRead(CatalogItem):
    pass
