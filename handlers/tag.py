"""Tag tools and resources."""

from handlers.params import (
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_numeric_param,
    required_param,
    restrict_values,
)
from handlers.registry import Registry, bind, dump, number, number_array, pagination, string
from teamwork import tag

ABOUT = "Tags are a way to mark items so that you can use a filter to see just those items."

TAG_FIELDS = {
    "name": string("The name of the tag. It must have less than 50 characters."),
    "project-id": number(
        "The ID of the project to associate the tag with. This is for when you need a project-scoped tag."
    ),
}


def register(registry: Registry) -> None:

    async def list_tags(engine):
        multiple = tag.Multiple()
        await engine.do(multiple)
        return multiple.response.tags

    async def get_tag(engine, tag_id):
        single = tag.Single(id=tag_id)
        await engine.do(single)
        return single.tag

    registry.collection("tags", "tag", list_tags, get_tag)

    @registry.tool(
        "retrieve-tags",
        f"Retrieve multiple tags in a customer site of Teamwork.com. {ABOUT}",
        {
            "search-term": string(
                "A search term to filter tags by name. "
                "Each word from the search term is used to match against the tag name."
            ),
            "item-type": string("The type of item to filter tags by.", enum=list(tag.ITEM_TYPES)),
            "project-ids": number_array("A list of project IDs to filter tags by projects."),
            **pagination(),
        },
    )
    async def retrieve_tags(engine, arguments):
        multiple = tag.Multiple()
        bind(
            arguments,
            optional_param(multiple.filters, "search_term", "search-term"),
            optional_param(multiple.filters, "item_type", "item-type", checks=[restrict_values(*tag.ITEM_TYPES)]),
            optional_numeric_list_param(multiple.filters, "project_ids", "project-ids"),
            optional_numeric_param(multiple.filters, "page", "page"),
            optional_numeric_param(multiple.filters, "page_size", "page-size"),
        )
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-tag",
        f"Retrieve a specific tag in a customer site of Teamwork.com. {ABOUT}",
        {"tag-id": number("The ID of the tag.")},
        required=["tag-id"],
    )
    async def retrieve_tag(engine, arguments):
        single = tag.Single()
        bind(arguments, required_numeric_param(single, "id", "tag-id"))
        await engine.do(single)
        return dump(single.tag)

    @registry.tool(
        "create-tag",
        f"Create a new tag in a customer site of Teamwork.com. {ABOUT}",
        TAG_FIELDS,
        required=["name"],
    )
    async def create_tag(engine, arguments):
        create = tag.Create()
        bind(
            arguments,
            required_param(create, "name", "name"),
            optional_numeric_param(create, "project_id", "project-id"),
        )
        await engine.do(create)
        return "Tag created successfully"

    @registry.tool(
        "update-tag",
        f"Update a tag in a customer site of Teamwork.com. {ABOUT}",
        {"tag-id": number("The ID of the tag to update."), **TAG_FIELDS},
        required=["tag-id"],
    )
    async def update_tag(engine, arguments):
        update = tag.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "tag-id"),
            optional_param(update, "name", "name"),
            optional_numeric_param(update, "project_id", "project-id"),
        )
        await engine.do(update)
        return "Tag updated successfully"

    @registry.tool(
        "delete-tag",
        f"Delete a tag in a customer site of Teamwork.com. {ABOUT}",
        {"tag-id": number("The ID of the tag to delete.")},
        required=["tag-id"],
    )
    async def delete_tag(engine, arguments):
        delete = tag.Delete()
        bind(arguments, required_numeric_param(delete, "id", "tag-id"))
        await engine.do(delete)
        return "Tag deleted successfully"
