"""Job role tools and resources."""

from handlers.params import optional_numeric_param, optional_param, required_numeric_param, required_param
from handlers.registry import Registry, bind, dump, number, pagination, string
from teamwork import jobrole

ABOUT = "Job role is a role that can be assigned to users."


def register(registry: Registry) -> None:

    async def list_jobroles(engine):
        multiple = jobrole.Multiple()
        multiple.filters.include = ["users"]
        await engine.do(multiple)
        return multiple.response.job_roles

    async def get_jobrole(engine, job_role_id):
        single = jobrole.Single(id=job_role_id)
        await engine.do(single)
        return single.job_role

    registry.collection("jobroles", "jobrole", list_jobroles, get_jobrole)

    @registry.tool(
        "retrieve-jobroles",
        f"Retrieve multiple job roles in a customer site of Teamwork.com. {ABOUT}",
        {
            "search-term": string(
                "A search term to filter job roles by name. Each word from the search term is used to match "
                "against the job role name or any assigned user name. The job role will be selected if each word "
                "of the term matches the job role name or assigned user name, not requiring that the word matches "
                "are in the same field."
            ),
            **pagination(),
        },
    )
    async def retrieve_jobroles(engine, arguments):
        multiple = jobrole.Multiple()
        multiple.filters.include = ["users"]
        bind(
            arguments,
            optional_param(multiple.filters, "search_term", "search-term"),
            optional_numeric_param(multiple.filters, "page", "page"),
            optional_numeric_param(multiple.filters, "page_size", "page-size"),
        )
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-jobrole",
        f"Retrieve a specific job role in a customer site of Teamwork.com. {ABOUT}",
        {"jobrole-id": number("The ID of the job role.")},
        required=["jobrole-id"],
    )
    async def retrieve_jobrole(engine, arguments):
        single = jobrole.Single()
        bind(arguments, required_numeric_param(single, "id", "jobrole-id"))
        await engine.do(single)
        return dump(single.job_role)

    @registry.tool(
        "create-jobrole",
        f"Create a new job role in a customer site of Teamwork.com. {ABOUT}",
        {"name": string("The name of the job role.")},
        required=["name"],
    )
    async def create_jobrole(engine, arguments):
        create = jobrole.Create()
        bind(arguments, required_param(create, "name", "name"))
        await engine.do(create)
        return "Job role created successfully"

    @registry.tool(
        "update-jobrole",
        f"Update a job role in a customer site of Teamwork.com. {ABOUT}",
        {
            "jobrole-id": number("The ID of the job role to update."),
            "name": string("The name of the job role."),
        },
        required=["jobrole-id", "name"],
    )
    async def update_jobrole(engine, arguments):
        update = jobrole.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "jobrole-id"),
            required_param(update, "name", "name"),
        )
        await engine.do(update)
        return "Job role updated successfully"

    @registry.tool(
        "delete-jobrole",
        f"Delete a job role in a customer site of Teamwork.com. {ABOUT}",
        {"jobrole-id": number("The ID of the job role to delete.")},
        required=["jobrole-id"],
    )
    async def delete_jobrole(engine, arguments):
        delete = jobrole.Delete()
        bind(arguments, required_numeric_param(delete, "id", "jobrole-id"))
        await engine.do(delete)
        return "Job role deleted successfully"
