"""Tasklist tools and resources."""

from handlers.params import optional_numeric_param, optional_param, required_numeric_param, required_param
from handlers.registry import Registry, bind, dump, number, pagination, string
from teamwork import tasklist

ABOUT = "A tasklist groups tasks together in a project for better organization."

LIST_FILTERS = {
    "search-term": string("A search term to filter tasklists by name."),
    **pagination(),
}


def _list_binders(multiple: tasklist.Multiple):
    return (
        optional_param(multiple.filters, "search_term", "search-term"),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def register(registry: Registry) -> None:

    async def list_tasklists(engine):
        multiple = tasklist.Multiple()
        await engine.do(multiple)
        return multiple.response.tasklists

    async def get_tasklist(engine, tasklist_id):
        single = tasklist.Single(id=tasklist_id)
        await engine.do(single)
        return single.tasklist

    registry.collection("tasklists", "tasklist", list_tasklists, get_tasklist)

    @registry.tool(
        "retrieve-tasklists",
        f"Retrieve multiple tasklists in a customer site of Teamwork.com. {ABOUT}",
        LIST_FILTERS,
    )
    async def retrieve_tasklists(engine, arguments):
        multiple = tasklist.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project-tasklists",
        f"Retrieve multiple tasklists from a specific project in a customer site of Teamwork.com. {ABOUT}",
        {"project-id": number("The ID of the project from which to retrieve tasklists."), **LIST_FILTERS},
        required=["project-id"],
    )
    async def retrieve_project_tasklists(engine, arguments):
        multiple = tasklist.Multiple()
        bind(arguments, required_numeric_param(multiple, "project_id", "project-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-tasklist",
        f"Retrieve a specific tasklist in a customer site of Teamwork.com. {ABOUT}",
        {"tasklist-id": number("The ID of the tasklist.")},
        required=["tasklist-id"],
    )
    async def retrieve_tasklist(engine, arguments):
        single = tasklist.Single()
        bind(arguments, required_numeric_param(single, "id", "tasklist-id"))
        await engine.do(single)
        return dump(single.tasklist)

    @registry.tool(
        "create-tasklist",
        f"Create a new tasklist in a customer site of Teamwork.com. {ABOUT}",
        {
            "name": string("The name of the tasklist."),
            "project-id": number("The ID of the project."),
            "description": string("The description of the tasklist."),
            "milestone-id": number("The ID of the milestone to associate with the tasklist."),
        },
        required=["name", "project-id"],
    )
    async def create_tasklist(engine, arguments):
        create = tasklist.Create()
        bind(
            arguments,
            required_param(create, "name", "name"),
            required_numeric_param(create, "project_id", "project-id"),
            optional_param(create, "description", "description"),
            optional_numeric_param(create, "milestone_id", "milestone-id"),
        )
        await engine.do(create)
        return "Tasklist created successfully"

    @registry.tool(
        "update-tasklist",
        f"Update an existing tasklist in a customer site of Teamwork.com. {ABOUT}",
        {
            "tasklist-id": number("The ID of the tasklist to update."),
            "name": string("The name of the tasklist."),
            "description": string("The description of the tasklist."),
            "milestone-id": number("The ID of the milestone to associate with the tasklist."),
        },
        required=["tasklist-id"],
    )
    async def update_tasklist(engine, arguments):
        update = tasklist.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "tasklist-id"),
            optional_param(update, "name", "name"),
            optional_param(update, "description", "description"),
            optional_numeric_param(update, "milestone_id", "milestone-id"),
        )
        await engine.do(update)
        return "Tasklist updated successfully"

    @registry.tool(
        "delete-tasklist",
        f"Delete a tasklist in a customer site of Teamwork.com. {ABOUT}",
        {"tasklist-id": number("The ID of the tasklist to delete.")},
        required=["tasklist-id"],
    )
    async def delete_tasklist(engine, arguments):
        delete = tasklist.Delete()
        bind(arguments, required_numeric_param(delete, "id", "tasklist-id"))
        await engine.do(delete)
        return "Tasklist deleted successfully"
