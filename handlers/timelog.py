"""Timelog tools and resources."""

from handlers.params import (
    ParamError,
    optional_date_param,
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    optional_time_param,
    required_date_param,
    required_numeric_param,
    required_time_param,
)
from handlers.registry import Registry, bind, boolean, dump, number, number_array, pagination, string
from teamwork import timelog

ABOUT = "Timelog is record of the amount a user spent working on a task or project."

LIST_FILTERS = {
    "tag-ids": number_array("A list of tag IDs to filter timelogs by tags."),
    "match-all-tags": boolean(
        "If true, match timelogs that have all the specified tags. "
        "If false, match timelogs that have any of them. Defaults to false."
    ),
    **pagination(),
}

TIMELOG_FIELDS = {
    "description": string("A description of the timelog."),
    "date": string("The date of the timelog in the format YYYY-MM-DD."),
    "time": string("The time of the timelog in the format HH:MM:SS."),
    "is-utc": boolean("If true, the time is in UTC. Defaults to false."),
    "hours": number("The number of hours spent on the timelog. Must be a positive integer."),
    "minutes": number(
        "The number of minutes spent on the timelog. Must be a positive integer less than 60, "
        "otherwise the hours attribute should be incremented."
    ),
    "billable": boolean("If true, the timelog is billable. Defaults to false."),
    "user-id": number(
        "The ID of the user to associate the timelog with. "
        "Defaults to the authenticated user if not provided."
    ),
    "tag-ids": number_array("A list of tag IDs to associate with the timelog."),
}


def _list_binders(multiple: timelog.Multiple):
    return (
        optional_numeric_list_param(multiple.filters, "tag_ids", "tag-ids"),
        optional_param(multiple.filters, "match_all_tags", "match-all-tags", bool),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def register(registry: Registry) -> None:

    async def list_timelogs(engine):
        multiple = timelog.Multiple()
        await engine.do(multiple)
        return multiple.response.timelogs

    async def get_timelog(engine, timelog_id):
        single = timelog.Single(id=timelog_id)
        await engine.do(single)
        return single.timelog

    registry.collection("timelogs", "timelog", list_timelogs, get_timelog)

    @registry.tool(
        "retrieve-timelogs",
        f"Retrieve multiple timelogs in a customer site of Teamwork.com. {ABOUT}",
        LIST_FILTERS,
    )
    async def retrieve_timelogs(engine, arguments):
        multiple = timelog.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project-timelogs",
        f"Retrieve multiple timelogs from a specific project in a customer site of Teamwork.com. {ABOUT}",
        {"project-id": number("The ID of the project from which to retrieve timelogs."), **LIST_FILTERS},
        required=["project-id"],
    )
    async def retrieve_project_timelogs(engine, arguments):
        multiple = timelog.Multiple()
        bind(arguments, required_numeric_param(multiple, "project_id", "project-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-task-timelogs",
        f"Retrieve multiple timelogs from a specific task in a customer site of Teamwork.com. {ABOUT}",
        {"task-id": number("The ID of the task from which to retrieve timelogs."), **LIST_FILTERS},
        required=["task-id"],
    )
    async def retrieve_task_timelogs(engine, arguments):
        multiple = timelog.Multiple()
        bind(arguments, required_numeric_param(multiple, "task_id", "task-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-timelog",
        f"Retrieve a specific timelog in a customer site of Teamwork.com. {ABOUT}",
        {"timelog-id": number("The ID of the timelog.")},
        required=["timelog-id"],
    )
    async def retrieve_timelog(engine, arguments):
        single = timelog.Single()
        bind(arguments, required_numeric_param(single, "id", "timelog-id"))
        await engine.do(single)
        return dump(single.timelog)

    @registry.tool(
        "create-timelog",
        f"Create a new timelog in a customer site of Teamwork.com. {ABOUT}",
        {
            **TIMELOG_FIELDS,
            "project-id": number(
                "The ID of the project to associate the timelog with. "
                "Either project-id or task-id must be provided, but not both."
            ),
            "task-id": number(
                "The ID of the task to associate the timelog with. "
                "Either project-id or task-id must be provided, but not both."
            ),
        },
        required=["date", "time", "hours", "minutes"],
    )
    async def create_timelog(engine, arguments):
        create = timelog.Create()
        bind(
            arguments,
            optional_param(create, "description", "description"),
            required_date_param(create, "date", "date"),
            required_time_param(create, "time", "time"),
            optional_param(create, "is_utc", "is-utc", bool),
            required_numeric_param(create, "hours", "hours"),
            required_numeric_param(create, "minutes", "minutes"),
            optional_param(create, "billable", "billable", bool),
            optional_numeric_param(create, "project_id", "project-id"),
            optional_numeric_param(create, "task_id", "task-id"),
            optional_numeric_param(create, "user_id", "user-id"),
            optional_numeric_list_param(create, "tag_ids", "tag-ids"),
        )
        if create.project_id <= 0 and create.task_id <= 0:
            raise ParamError("invalid parameters: one of project-id or task-id must be provided")
        await engine.do(create)
        return "Timelog created successfully"

    @registry.tool(
        "update-timelog",
        f"Update a timelog in a customer site of Teamwork.com. {ABOUT}",
        {"timelog-id": number("The ID of the timelog to update."), **TIMELOG_FIELDS},
        required=["timelog-id"],
    )
    async def update_timelog(engine, arguments):
        update = timelog.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "timelog-id"),
            optional_param(update, "description", "description"),
            optional_date_param(update, "date", "date"),
            optional_time_param(update, "time", "time"),
            optional_param(update, "is_utc", "is-utc", bool),
            optional_numeric_param(update, "hours", "hours"),
            optional_numeric_param(update, "minutes", "minutes"),
            optional_param(update, "billable", "billable", bool),
            optional_numeric_param(update, "user_id", "user-id"),
            optional_numeric_list_param(update, "tag_ids", "tag-ids"),
        )
        await engine.do(update)
        return "Timelog updated successfully"

    @registry.tool(
        "delete-timelog",
        f"Delete a timelog in a customer site of Teamwork.com. {ABOUT}",
        {"timelog-id": number("The ID of the timelog to delete.")},
        required=["timelog-id"],
    )
    async def delete_timelog(engine, arguments):
        delete = timelog.Delete()
        bind(arguments, required_numeric_param(delete, "id", "timelog-id"))
        await engine.do(delete)
        return "Timelog deleted successfully"
