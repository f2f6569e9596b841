"""Activity feed tools and resources."""

from handlers.params import (
    optional_datetime_param,
    optional_list_param,
    optional_numeric_param,
    required_numeric_param,
    restrict_values,
)
from handlers.registry import Registry, bind, dump, number, pagination, string, string_array
from teamwork import activity

LIST_FILTERS = {
    "start-date": string(
        "Start date to filter activities. The date format follows RFC3339 - YYYY-MM-DDTHH:MM:SSZ."
    ),
    "end-date": string(
        "End date to filter activities. The date format follows RFC3339 - YYYY-MM-DDTHH:MM:SSZ."
    ),
    "log-item-types": string_array("Filter activities by item types.", enum=list(activity.LOG_ITEM_TYPES)),
    **pagination(),
}


def _list_binders(multiple: activity.Multiple):
    return (
        optional_datetime_param(multiple.filters, "start_date", "start-date"),
        optional_datetime_param(multiple.filters, "end_date", "end-date"),
        optional_list_param(
            multiple.filters, "log_item_types", "log-item-types", checks=[restrict_values(*activity.LOG_ITEM_TYPES)]
        ),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def register(registry: Registry) -> None:

    async def list_activities(engine):
        multiple = activity.Multiple()
        await engine.do(multiple)
        return multiple.response.activities

    registry.collection("activities", "activity", list_activities)

    @registry.tool(
        "retrieve-activities",
        "Retrieve multiple activities in a customer site of Teamwork.com. "
        "Feed of all activity across your projects, including updates to various project items.",
        LIST_FILTERS,
    )
    async def retrieve_activities(engine, arguments):
        multiple = activity.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project-activities",
        "Retrieve multiple activities from a project in a customer site of Teamwork.com. "
        "Feed of all activity within a project.",
        {"project-id": number("The ID of the project to retrieve activities from."), **LIST_FILTERS},
        required=["project-id"],
    )
    async def retrieve_project_activities(engine, arguments):
        multiple = activity.Multiple()
        bind(arguments, required_numeric_param(multiple, "project_id", "project-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)
