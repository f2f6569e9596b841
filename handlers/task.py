"""Task tools and resources."""

from handlers.params import (
    optional_date_param,
    optional_numeric_list_param,
    optional_numeric_param,
    optional_object_param,
    optional_param,
    required_numeric_param,
    required_param,
    restrict_values,
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
from teamwork import task
from teamwork.types import UserGroups

ABOUT = (
    "Task is an activity that needs to be carried out by one or multiple project "
    "members to be completed."
)

LIST_FILTERS = {
    "search-term": string("A search term to filter tasks by name or description."),
    "tag-ids": number_array("A list of tag IDs to filter tasks by tags."),
    "match-all-tags": boolean(
        "If true, match tasks that have all the specified tags. "
        "If false, match tasks that have any of them. Defaults to false."
    ),
    **pagination(),
}

TASK_FIELDS = {
    "name": string("The name of the task."),
    "description": string("The description of the task."),
    "priority": string("The priority of the task.", enum=list(task.PRIORITIES)),
    "progress": number("The progress of the task, as a percentage (0-100)."),
    "start-date": string("The start date of the task in the format YYYY-MM-DD."),
    "due-date": string("The due date of the task in the format YYYY-MM-DD."),
    "estimated-minutes": number("The estimated time to complete the task, in minutes."),
    "assignees": obj(
        "Users, companies and teams assigned to the task.",
        {
            "user-ids": number_array("List of user IDs assigned to the task."),
            "company-ids": number_array("List of company IDs assigned to the task."),
            "team-ids": number_array("List of team IDs assigned to the task."),
        },
    ),
    "tag-ids": number_array("A list of tag IDs to assign to the task."),
}


def _list_binders(multiple: task.Multiple):
    return (
        optional_param(multiple.filters, "search_term", "search-term"),
        optional_numeric_list_param(multiple.filters, "tag_ids", "tag-ids"),
        optional_param(multiple.filters, "match_all_tags", "match-all-tags", bool),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def _field_binders(target, assignees: UserGroups):
    return (
        optional_param(target, "description", "description"),
        optional_param(target, "priority", "priority", checks=[restrict_values(*task.PRIORITIES)]),
        optional_numeric_param(target, "progress", "progress"),
        optional_date_param(target, "start_at", "start-date"),
        optional_date_param(target, "due_at", "due-date"),
        optional_numeric_param(target, "estimated_minutes", "estimated-minutes"),
        optional_object_param(
            "assignees",
            optional_numeric_list_param(assignees, "user_ids", "user-ids"),
            optional_numeric_list_param(assignees, "company_ids", "company-ids"),
            optional_numeric_list_param(assignees, "team_ids", "team-ids"),
        ),
        optional_numeric_list_param(target, "tag_ids", "tag-ids"),
    )


def register(registry: Registry) -> None:

    async def list_tasks(engine):
        multiple = task.Multiple()
        await engine.do(multiple)
        return multiple.response.tasks

    async def get_task(engine, task_id):
        single = task.Single(id=task_id)
        await engine.do(single)
        return single.task

    registry.collection("tasks", "task", list_tasks, get_task)

    @registry.tool(
        "retrieve-tasks",
        f"Retrieve multiple tasks in a customer site of Teamwork.com. {ABOUT}",
        LIST_FILTERS,
    )
    async def retrieve_tasks(engine, arguments):
        multiple = task.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project-tasks",
        f"Retrieve multiple tasks from a specific project in a customer site of Teamwork.com. {ABOUT}",
        {"project-id": number("The ID of the project from which to retrieve tasks."), **LIST_FILTERS},
        required=["project-id"],
    )
    async def retrieve_project_tasks(engine, arguments):
        multiple = task.Multiple()
        bind(arguments, required_numeric_param(multiple, "project_id", "project-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-tasklist-tasks",
        f"Retrieve multiple tasks from a specific tasklist in a customer site of Teamwork.com. {ABOUT}",
        {"tasklist-id": number("The ID of the tasklist from which to retrieve tasks."), **LIST_FILTERS},
        required=["tasklist-id"],
    )
    async def retrieve_tasklist_tasks(engine, arguments):
        multiple = task.Multiple()
        bind(arguments, required_numeric_param(multiple, "tasklist_id", "tasklist-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-task",
        f"Retrieve a specific task in a customer site of Teamwork.com. {ABOUT}",
        {"task-id": number("The ID of the task.")},
        required=["task-id"],
    )
    async def retrieve_task(engine, arguments):
        single = task.Single()
        bind(arguments, required_numeric_param(single, "id", "task-id"))
        await engine.do(single)
        return dump(single.task)

    @registry.tool(
        "create-task",
        f"Create a new task in a customer site of Teamwork.com. {ABOUT}",
        {"tasklist-id": number("The ID of the tasklist where the task will be created."), **TASK_FIELDS},
        required=["tasklist-id", "name"],
    )
    async def create_task(engine, arguments):
        create = task.Create()
        assignees = UserGroups()
        bind(
            arguments,
            required_numeric_param(create, "tasklist_id", "tasklist-id"),
            required_param(create, "name", "name"),
            *_field_binders(create, assignees),
        )
        if not assignees.is_empty():
            create.assignees = assignees

        await engine.do(create)
        return "Task created successfully"

    @registry.tool(
        "update-task",
        f"Update an existing task in a customer site of Teamwork.com. {ABOUT}",
        {
            "task-id": number("The ID of the task to update."),
            "tasklist-id": number("The ID of the tasklist to move the task to."),
            **TASK_FIELDS,
        },
        required=["task-id"],
    )
    async def update_task(engine, arguments):
        update = task.Update()
        assignees = UserGroups()
        bind(
            arguments,
            required_numeric_param(update, "id", "task-id"),
            optional_numeric_param(update, "tasklist_id", "tasklist-id"),
            optional_param(update, "name", "name"),
            *_field_binders(update, assignees),
        )
        if not assignees.is_empty():
            update.assignees = assignees

        await engine.do(update)
        return "Task updated successfully"
