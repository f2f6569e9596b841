"""User tools and resources, including project and job role membership and workload."""

from handlers.params import (
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_date_param,
    required_numeric_list_param,
    required_numeric_param,
    required_param,
    restrict_values,
)
from handlers.registry import Registry, bind, boolean, dump, number, number_array, pagination, string
from teamwork import user, workload

ABOUT = "User, also known as person, is an individual who can be assigned to tasks."

WORKLOAD_ABOUT = (
    "The workload allows you to see the users' overall workload on a short term, day-to-day basis, "
    "allowing for a more granular view of each person's capacity. An individual's capacity is based on "
    "their working hours, returned in the workload response, versus the total estimated time on their "
    "assigned tasks (minus any unavailable time assigned to them) in the selected time frame. A user is "
    "considered over capacity when their capacity exceeds their working hours. Missing dates in the "
    "response should be interpreted as the user not having any tasks assigned to them on that date and "
    "being available."
)

LIST_FILTERS = {
    "search-term": string(
        "A search term to filter users by first or last names, or e-mail. The user will be selected if "
        "each word of the term matches the first or last name, or e-mail, not requiring that the word "
        "matches are in the same field."
    ),
    "type": string(
        "Type of user to filter by. The available options are account, collaborator or contact.",
        enum=list(user.USER_TYPES),
    ),
    **pagination(),
}

USER_FIELDS = {
    "first-name": string("The first name of the user."),
    "last-name": string("The last name of the user."),
    "title": string("The job title of the user, such as 'Project Manager' or 'Senior Software Developer'."),
    "email": string("The email address of the user."),
    "admin": boolean("Indicates whether the user is an administrator."),
    "type": string(
        "The type of user, such as 'account', 'collaborator', or 'contact'.",
        enum=list(user.USER_TYPES),
    ),
    "company-id": number("The ID of the company to which the user belongs."),
}

JOBROLE_MEMBERS = {
    "jobrole-id": number("The ID of the job role."),
    "user-ids": number_array("A list of user IDs."),
    "is-primary": boolean("If true, the job role is the primary one of the users. Defaults to false."),
}

_user_type = restrict_values(*user.USER_TYPES)


def _list_binders(multiple: user.Multiple):
    return (
        optional_param(multiple.filters, "search_term", "search-term"),
        optional_param(multiple.filters, "type", "type", checks=[_user_type]),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def _jobrole_binders(membership: user.JobRoleAssign):
    return (
        required_numeric_param(membership, "job_role_id", "jobrole-id"),
        required_numeric_list_param(membership, "user_ids", "user-ids"),
        optional_param(membership, "is_primary", "is-primary", bool),
    )


def register(registry: Registry) -> None:

    async def list_users(engine):
        multiple = user.Multiple()
        await engine.do(multiple)
        return multiple.response.users

    async def get_user(engine, user_id):
        single = user.Single(id=user_id)
        await engine.do(single)
        return single.user

    registry.collection("users", "user", list_users, get_user)

    @registry.tool(
        "retrieve-users",
        f"Retrieve multiple users, also know as people, in a customer site of Teamwork.com. {ABOUT}",
        LIST_FILTERS,
    )
    async def retrieve_users(engine, arguments):
        multiple = user.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-project-users",
        f"Retrieve users, also known as people, from a specific project. {ABOUT}",
        {"project-id": number("The ID of the project from which to retrieve users."), **LIST_FILTERS},
        required=["project-id"],
    )
    async def retrieve_project_users(engine, arguments):
        multiple = user.Multiple()
        bind(arguments, required_numeric_param(multiple, "project_id", "project-id"), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-user",
        f"Retrieve a specific user, also know as person, in a customer site of Teamwork.com. {ABOUT}",
        {"user-id": number("The ID of the user.")},
        required=["user-id"],
    )
    async def retrieve_user(engine, arguments):
        single = user.Single()
        bind(arguments, required_numeric_param(single, "id", "user-id"))
        await engine.do(single)
        return dump(single.user)

    @registry.tool(
        "create-user",
        f"Create a new user, who can be assigned to tasks. {ABOUT}",
        USER_FIELDS,
        required=["first-name", "last-name", "email"],
    )
    async def create_user(engine, arguments):
        create = user.Create()
        bind(
            arguments,
            required_param(create, "first_name", "first-name"),
            required_param(create, "last_name", "last-name"),
            optional_param(create, "title", "title"),
            required_param(create, "email", "email"),
            optional_param(create, "admin", "admin", bool),
            optional_param(create, "type", "type", checks=[_user_type]),
            optional_numeric_param(create, "company_id", "company-id"),
        )
        await engine.do(create)
        return "User created successfully"

    @registry.tool(
        "update-user",
        f"Update an existing user, who can be assigned to tasks. {ABOUT}",
        {
            "user-id": number("The ID of the user to update."),
            **USER_FIELDS,
            "password": string("A new password for the user."),
        },
        required=["user-id"],
    )
    async def update_user(engine, arguments):
        update = user.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "user-id"),
            optional_param(update, "first_name", "first-name"),
            optional_param(update, "last_name", "last-name"),
            optional_param(update, "title", "title"),
            optional_param(update, "email", "email"),
            optional_param(update, "password", "password"),
            optional_param(update, "admin", "admin", bool),
            optional_param(update, "type", "type", checks=[_user_type]),
            optional_numeric_param(update, "company_id", "company-id"),
        )
        await engine.do(update)
        return "User updated successfully"

    @registry.tool(
        "delete-user",
        f"Delete a user in a customer site of Teamwork.com. {ABOUT}",
        {"user-id": number("The ID of the user to delete.")},
        required=["user-id"],
    )
    async def delete_user(engine, arguments):
        delete = user.Delete()
        bind(arguments, required_numeric_param(delete, "id", "user-id"))
        await engine.do(delete)
        return "User deleted successfully"

    # ─── Memberships ────────────────────────────────────────────

    @registry.tool(
        "project-users",
        "Assign users to a specific project.",
        {
            "project-id": number("The ID of the project to which users will be assigned."),
            "user-ids": number_array("An array of user IDs to assign to the project."),
        },
        required=["project-id", "user-ids"],
    )
    async def project_users(engine, arguments):
        add = user.ProjectAdd()
        bind(
            arguments,
            required_numeric_param(add, "project_id", "project-id"),
            required_numeric_list_param(add, "user_ids", "user-ids"),
        )
        await engine.do(add)
        return "Users assigned to project successfully"

    @registry.tool(
        "assign-jobrole-users",
        "Assign users to a job role in a customer site of Teamwork.com.",
        JOBROLE_MEMBERS,
        required=["jobrole-id", "user-ids"],
    )
    async def assign_jobrole_users(engine, arguments):
        assign = user.JobRoleAssign()
        bind(arguments, *_jobrole_binders(assign))
        await engine.do(assign)
        return "Users assigned to job role successfully"

    @registry.tool(
        "unassign-jobrole-users",
        "Remove users from a job role in a customer site of Teamwork.com.",
        JOBROLE_MEMBERS,
        required=["jobrole-id", "user-ids"],
    )
    async def unassign_jobrole_users(engine, arguments):
        unassign = user.JobRoleUnassign()
        bind(arguments, *_jobrole_binders(unassign))
        await engine.do(unassign)
        return "Users unassigned from job role successfully"

    # ─── Workload ───────────────────────────────────────────────

    @registry.tool(
        "retrieve-users-workload",
        f"Retrieve the workload of users, also known as people, in a customer site of Teamwork.com. {WORKLOAD_ABOUT}",
        {
            "start-date": string("The start date of the workload period. The date must be in the format YYYY-MM-DD."),
            "end-date": string("The end date of the workload period. The date must be in the format YYYY-MM-DD."),
            "user-ids": number_array("A list of user IDs to retrieve the workload for."),
            **pagination(),
        },
        required=["start-date", "end-date"],
    )
    async def retrieve_users_workload(engine, arguments):
        single = workload.Single()
        single.filters.include = ["users.workingHours.workingHoursEntry"]
        bind(
            arguments,
            required_date_param(single.filters, "start_date", "start-date"),
            required_date_param(single.filters, "end_date", "end-date"),
            optional_numeric_list_param(single.filters, "user_ids", "user-ids"),
            optional_numeric_param(single.filters, "page", "page"),
            optional_numeric_param(single.filters, "page_size", "page-size"),
        )
        await engine.do(single)
        return dump(single.response)
