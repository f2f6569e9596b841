"""Industry tool and resource (list only)."""

from handlers.registry import Registry, dump
from teamwork import industry

ABOUT = "Industries are categories that companies can belong to in Teamwork.com."


def register(registry: Registry) -> None:

    async def list_industries(engine):
        multiple = industry.Multiple()
        await engine.do(multiple)
        return multiple.response.industries

    registry.collection("industries", "industry", list_industries)

    @registry.tool("retrieve-industries", f"Retrieve multiple industries in a customer site of Teamwork.com. {ABOUT}")
    async def retrieve_industries(engine, arguments):
        multiple = industry.Multiple()
        await engine.do(multiple)
        return dump(multiple.response)
