"""Team tools and resources."""

from handlers.params import (
    optional_legacy_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_numeric_param,
    required_param,
)
from handlers.registry import Registry, bind, dump, number, number_array, pagination, string
from teamwork import team

ABOUT = (
    "Teams replicate your organization's structure and group people on your site based on their "
    "position or contribution."
)

TEAM_FIELDS = {
    "name": string("The name of the team."),
    "handle": string(
        "The handle of the team. It is a unique identifier for the team. "
        "It must not have spaces or special characters."
    ),
    "description": string("The description of the team."),
    "company-id": number("The ID of the company. This is used to create a team scoped for a specific company."),
    "project-id": number("The ID of the project. This is used to create a team scoped for a specific project."),
    "user-ids": number_array("A list of user IDs to add to the team."),
}


def _field_binders(target):
    return (
        optional_param(target, "handle", "handle"),
        optional_param(target, "description", "description"),
        optional_numeric_param(target, "company_id", "company-id"),
        optional_numeric_param(target, "project_id", "project-id"),
        optional_legacy_numeric_list_param(target, "user_ids", "user-ids"),
    )


def register(registry: Registry) -> None:

    async def list_teams(engine):
        multiple = team.Multiple()
        await engine.do(multiple)
        return multiple.response.teams

    async def get_team(engine, team_id):
        single = team.Single(id=team_id)
        await engine.do(single)
        return single.team

    registry.collection("teams", "team", list_teams, get_team)

    @registry.tool(
        "retrieve-teams",
        f"Retrieve multiple teams in a customer site of Teamwork.com. {ABOUT}",
        {"search-term": string("A search term to filter teams by name or handle."), **pagination()},
    )
    async def retrieve_teams(engine, arguments):
        multiple = team.Multiple()
        bind(
            arguments,
            optional_param(multiple.filters, "search_term", "search-term"),
            optional_numeric_param(multiple.filters, "page", "page"),
            optional_numeric_param(multiple.filters, "page_size", "page-size"),
        )
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-team",
        f"Retrieve a specific team in a customer site of Teamwork.com. {ABOUT}",
        {"team-id": number("The ID of the team.")},
        required=["team-id"],
    )
    async def retrieve_team(engine, arguments):
        single = team.Single()
        bind(arguments, required_numeric_param(single, "id", "team-id"))
        await engine.do(single)
        return dump(single.team)

    @registry.tool(
        "create-team",
        f"Create a new team in a customer site of Teamwork.com. {ABOUT}",
        {
            **TEAM_FIELDS,
            "parent-team-id": number("The ID of the parent team. This is used to create a hierarchy of teams."),
        },
        required=["name"],
    )
    async def create_team(engine, arguments):
        create = team.Create()
        bind(
            arguments,
            required_param(create, "name", "name"),
            optional_numeric_param(create, "parent_team_id", "parent-team-id"),
            *_field_binders(create),
        )
        await engine.do(create)
        return "Team created successfully"

    @registry.tool(
        "update-team",
        f"Update a team in a customer site of Teamwork.com. {ABOUT}",
        {"team-id": number("The ID of the team to update."), **TEAM_FIELDS},
        required=["team-id"],
    )
    async def update_team(engine, arguments):
        update = team.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "team-id"),
            optional_param(update, "name", "name"),
            *_field_binders(update),
        )
        await engine.do(update)
        return "Team updated successfully"

    @registry.tool(
        "delete-team",
        f"Delete a team in a customer site of Teamwork.com. {ABOUT}",
        {"team-id": number("The ID of the team to delete.")},
        required=["team-id"],
    )
    async def delete_team(engine, arguments):
        delete = team.Delete()
        bind(arguments, required_numeric_param(delete, "id", "team-id"))
        await engine.do(delete)
        return "Team deleted successfully"
