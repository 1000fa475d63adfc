"""GraphQL endpoint using Strawberry.

Exposes the ``lolomo`` home query (the category rows) and a prefix
``search``. ``Title.artworkId`` has its own resolver so that artwork is
only generated for the titles a client actually selects it on; each of
those resolvers runs concurrently on the service's worker pool.
"""

from typing import List

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from .catalog.router import get_service
from .catalog.schemas import Category, Title
from .catalog.service import LolomoService


@strawberry.type(name="Title")
class TitleType:
    record: strawberry.Private[Title]

    @strawberry.field
    def name(self) -> str:
        return self.record.name

    @strawberry.field
    async def artwork_id(self, info: Info) -> str:
        service: LolomoService = info.context["service"]
        return await service.resolve_artwork(self.record)


@strawberry.type(name="Category")
class CategoryType:
    id: int
    name: str
    titles: List[TitleType]

    @classmethod
    def from_category(cls, category: Category) -> "CategoryType":
        return cls(
            id=category.id,
            name=category.name,
            titles=[TitleType(record=t) for t in category.titles],
        )


@strawberry.input
class SearchFilter:
    title: str = ""


@strawberry.type
class Query:
    @strawberry.field
    def lolomo(self, info: Info) -> List[CategoryType]:
        service: LolomoService = info.context["service"]
        return [CategoryType.from_category(c) for c in service.list_categories()]

    @strawberry.field
    def search(self, info: Info, search_filter: SearchFilter) -> List[TitleType]:
        service: LolomoService = info.context["service"]
        return [TitleType(record=t) for t in service.search(search_filter.title)]


schema = strawberry.Schema(query=Query)


def get_context(service: LolomoService = Depends(get_service)) -> dict:
    return {"service": service}


graphql_router = GraphQLRouter(schema, context_getter=get_context)
