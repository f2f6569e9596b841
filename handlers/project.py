"""Project tools and resources."""

from handlers.params import (
    optional_legacy_date_param,
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_numeric_param,
    required_param,
)
from handlers.registry import Registry, bind, boolean, dump, number, number_array, pagination, string
from teamwork import project

ABOUT = (
    "Project is a central hub to manage all of the components relating to what "
    "your team is working on."
)

PROJECT_FIELDS = {
    "name": string("The name of the project."),
    "description": string("The description of the project."),
    "start-at": string("The start date of the project in the format YYYYMMDD."),
    "end-at": string("The end date of the project in the format YYYYMMDD."),
    "company-id": number("The ID of the company associated with the project."),
    "owner-id": number("The ID of the user who owns the project."),
    "tag-ids": number_array("A list of tag IDs to associate with the project."),
}


def register(registry: Registry) -> None:

    async def list_projects(engine):
        multiple = project.Multiple()
        await engine.do(multiple)
        return multiple.response.projects

    async def get_project(engine, project_id):
        single = project.Single(id=project_id)
        await engine.do(single)
        return single.project

    registry.collection("projects", "project", list_projects, get_project)

    @registry.tool(
        "retrieve-projects",
        f"Retrieve multiple projects in a customer site of Teamwork.com. {ABOUT}",
        {
            "search-term": string("A search term to filter projects by name or description."),
            "tag-ids": number_array("A list of tag IDs to filter projects by tags."),
            "match-all-tags": boolean(
                "If true, match projects that have all the specified tags. "
                "If false, match projects that have any of them. Defaults to false."
            ),
            **pagination(),
        },
    )
    async def retrieve_projects(engine, arguments):
        multiple = project.Multiple()
        bind(
            arguments,
            optional_param(multiple.filters, "search_term", "search-term"),
            optional_numeric_list_param(multiple.filters, "tag_ids", "tag-ids"),
            optional_param(multiple.filters, "match_all_tags", "match-all-tags", bool),
            optional_numeric_param(multiple.filters, "page", "page"),
            optional_numeric_param(multiple.filters, "page_size", "page-size"),
        )
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project",
        f"Retrieve a specific project in a customer site of Teamwork.com. {ABOUT}",
        {"project-id": number("The ID of the project.")},
        required=["project-id"],
    )
    async def retrieve_project(engine, arguments):
        single = project.Single()
        bind(arguments, required_numeric_param(single, "id", "project-id"))
        await engine.do(single)
        return dump(single.project)

    @registry.tool(
        "create-project",
        f"Create a new project in a customer site of Teamwork.com. {ABOUT}",
        PROJECT_FIELDS,
        required=["name"],
    )
    async def create_project(engine, arguments):
        create = project.Create()
        bind(
            arguments,
            required_param(create, "name", "name"),
            optional_param(create, "description", "description"),
            optional_legacy_date_param(create, "start_at", "start-at"),
            optional_legacy_date_param(create, "end_at", "end-at"),
            optional_numeric_param(create, "company_id", "company-id"),
            optional_numeric_param(create, "owner_id", "owner-id"),
            optional_numeric_list_param(create, "tag_ids", "tag-ids"),
        )
        await engine.do(create)
        return "Project created successfully"

    @registry.tool(
        "update-project",
        f"Update an existing project in a customer site of Teamwork.com. {ABOUT}",
        {"project-id": number("The ID of the project to update."), **PROJECT_FIELDS},
        required=["project-id"],
    )
    async def update_project(engine, arguments):
        update = project.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "project-id"),
            optional_param(update, "name", "name"),
            optional_param(update, "description", "description"),
            optional_legacy_date_param(update, "start_at", "start-at"),
            optional_legacy_date_param(update, "end_at", "end-at"),
            optional_numeric_param(update, "company_id", "company-id"),
            optional_numeric_param(update, "owner_id", "owner-id"),
            optional_numeric_list_param(update, "tag_ids", "tag-ids"),
        )
        await engine.do(update)
        return "Project updated successfully"
