"""Milestone tools and resources."""

from handlers.params import (
    ParamError,
    optional_legacy_date_param,
    optional_numeric_list_param,
    optional_numeric_param,
    optional_object_param,
    optional_param,
    required_legacy_date_param,
    required_numeric_param,
    required_object_param,
    required_param,
)
from handlers.registry import (
    Registry,
    bind,
    boolean,
    dump,
    number,
    number_array,
    obj,
    pagination,
    string,
)
from teamwork import milestone
from teamwork.scalars import LegacyUserGroups

ABOUT = (
    "Milestone is a target date representing a point of progress, or goal within a "
    "project, that you can use task lists to track progress towards."
)

LIST_FILTERS = {
    "search-term": string(
        "A search term to filter milestones by name. Each word from the search term is "
        "matched against the milestone name and description; every word must match one "
        "of the two fields."
    ),
    "tag-ids": number_array("A list of tag IDs to filter milestones by tags."),
    "match-all-tags": boolean(
        "If true, match milestones that have all the specified tags. "
        "If false, match milestones that have any of them. Defaults to false."
    ),
    **pagination(),
}

ASSIGNEES = {
    "user-ids": number_array("List of user IDs assigned to the milestone."),
    "company-ids": number_array("List of company IDs assigned to the milestone."),
    "team-ids": number_array("List of team IDs assigned to the milestone."),
}


def _list_binders(multiple: milestone.Multiple):
    return (
        optional_param(multiple.filters, "search_term", "search-term"),
        optional_numeric_list_param(multiple.filters, "tag_ids", "tag-ids"),
        optional_param(multiple.filters, "match_all_tags", "match-all-tags", bool),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def _assignee_binders(groups: LegacyUserGroups):
    return (
        optional_numeric_list_param(groups, "user_ids", "user-ids"),
        optional_numeric_list_param(groups, "company_ids", "company-ids"),
        optional_numeric_list_param(groups, "team_ids", "team-ids"),
    )


def register(registry: Registry) -> None:

    async def list_milestones(engine):
        multiple = milestone.Multiple()
        await engine.do(multiple)
        return multiple.response.milestones

    async def get_milestone(engine, milestone_id):
        single = milestone.Single(id=milestone_id)
        await engine.do(single)
        return single.milestone

    registry.collection("milestones", "milestone", list_milestones, get_milestone)

    @registry.tool(
        "retrieve-milestones",
        f"Retrieve multiple milestones in a customer site of Teamwork.com. {ABOUT}",
        LIST_FILTERS,
    )
    async def retrieve_milestones(engine, arguments):
        multiple = milestone.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project-milestones",
        f"Retrieve multiple milestones from a specific project in a customer site of Teamwork.com. {ABOUT}",
        {"project-id": number("The ID of the project to retrieve milestones from."), **LIST_FILTERS},
        required=["project-id"],
    )
    async def retrieve_project_milestones(engine, arguments):
        multiple = milestone.Multiple()
        bind(
            arguments,
            required_numeric_param(multiple, "project_id", "project-id"),
            *_list_binders(multiple),
        )
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-milestone",
        f"Retrieve a specific milestone in a customer site of Teamwork.com. {ABOUT}",
        {"milestone-id": number("The ID of the milestone.")},
        required=["milestone-id"],
    )
    async def retrieve_milestone(engine, arguments):
        single = milestone.Single()
        bind(arguments, required_numeric_param(single, "id", "milestone-id"))
        await engine.do(single)
        return dump(single.milestone)

    @registry.tool(
        "create-milestone",
        f"Create a new milestone in a customer site of Teamwork.com. {ABOUT}",
        {
            "project-id": number("The ID of the project where the milestone will be created."),
            "name": string("The name of the milestone."),
            "description": string("A description of the milestone."),
            "due-date": string("The due date of the milestone in the format YYYYMMDD."),
            "assignees": obj(
                "Users, companies and teams responsible for the milestone. "
                "At least one assignee must be provided.",
                ASSIGNEES,
            ),
            "tasklist-ids": number_array("A list of tasklist IDs to associate with the milestone."),
            "tag-ids": number_array("A list of tag IDs to associate with the milestone."),
        },
        required=["project-id", "name", "due-date", "assignees"],
    )
    async def create_milestone(engine, arguments):
        create = milestone.Create()
        bind(
            arguments,
            required_numeric_param(create, "project_id", "project-id"),
            required_param(create, "name", "name"),
            optional_param(create, "description", "description"),
            required_legacy_date_param(create, "due_date", "due-date"),
            required_object_param("assignees", *_assignee_binders(create.assignees)),
            optional_numeric_list_param(create, "tasklist_ids", "tasklist-ids"),
            optional_numeric_list_param(create, "tag_ids", "tag-ids"),
        )
        if create.assignees.is_empty():
            raise ParamError("invalid parameters: at least one assignee must be provided")

        await engine.do(create)
        return "Milestone created successfully"

    @registry.tool(
        "update-milestone",
        f"Update an existing milestone in a customer site of Teamwork.com. {ABOUT}",
        {
            "milestone-id": number("The ID of the milestone to update."),
            "name": string("The name of the milestone."),
            "description": string("A description of the milestone."),
            "due-date": string("The due date of the milestone in the format YYYYMMDD."),
            "assignees": obj("Users, companies and teams responsible for the milestone.", ASSIGNEES),
            "tasklist-ids": number_array("A list of tasklist IDs to associate with the milestone."),
            "tag-ids": number_array("A list of tag IDs to associate with the milestone."),
        },
        required=["milestone-id"],
    )
    async def update_milestone(engine, arguments):
        update = milestone.Update()
        assignees = LegacyUserGroups()
        bind(
            arguments,
            required_numeric_param(update, "id", "milestone-id"),
            optional_param(update, "name", "name"),
            optional_param(update, "description", "description"),
            optional_legacy_date_param(update, "due_date", "due-date"),
            optional_object_param("assignees", *_assignee_binders(assignees)),
            optional_numeric_list_param(update, "tasklist_ids", "tasklist-ids"),
            optional_numeric_list_param(update, "tag_ids", "tag-ids"),
        )
        if not assignees.is_empty():
            update.assignees = assignees

        await engine.do(update)
        return "Milestone updated successfully"

    @registry.tool(
        "delete-milestone",
        f"Delete a milestone in a customer site of Teamwork.com. {ABOUT}",
        {"milestone-id": number("The ID of the milestone to delete.")},
        required=["milestone-id"],
    )
    async def delete_milestone(engine, arguments):
        delete = milestone.Delete()
        bind(arguments, required_numeric_param(delete, "id", "milestone-id"))
        await engine.do(delete)
        return "Milestone deleted successfully"
