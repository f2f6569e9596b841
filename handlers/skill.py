"""Skill tools and resources."""

from handlers.params import (
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_numeric_param,
    required_param,
)
from handlers.registry import Registry, bind, dump, number, number_array, pagination, string
from teamwork import skill

ABOUT = "Skill is a knowledge or ability that can be assigned to users."

SKILL_FIELDS = {
    "name": string("The name of the skill."),
    "user-ids": number_array("A list of user IDs assigned to the skill."),
}


def register(registry: Registry) -> None:

    async def list_skills(engine):
        multiple = skill.Multiple()
        multiple.filters.include = ["users"]
        await engine.do(multiple)
        return multiple.response.skills

    async def get_skill(engine, skill_id):
        single = skill.Single(id=skill_id)
        await engine.do(single)
        return single.skill

    registry.collection("skills", "skill", list_skills, get_skill)

    @registry.tool(
        "retrieve-skills",
        f"Retrieve multiple skills in a customer site of Teamwork.com. {ABOUT}",
        {
            "search-term": string(
                "A search term to filter skills by name, or by the first or last names of the user associated "
                "with the skill. The skill will be selected if each word of the term matches the skill name or "
                "the user first or last name, not requiring that the word matches are in the same field."
            ),
            **pagination(),
        },
    )
    async def retrieve_skills(engine, arguments):
        multiple = skill.Multiple()
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
        "retrieve-skill",
        f"Retrieve a specific skill in a customer site of Teamwork.com. {ABOUT}",
        {"skill-id": number("The ID of the skill.")},
        required=["skill-id"],
    )
    async def retrieve_skill(engine, arguments):
        single = skill.Single()
        bind(arguments, required_numeric_param(single, "id", "skill-id"))
        await engine.do(single)
        return dump(single.skill)

    @registry.tool(
        "create-skill",
        f"Create a new skill in a customer site of Teamwork.com. {ABOUT}",
        SKILL_FIELDS,
        required=["name"],
    )
    async def create_skill(engine, arguments):
        create = skill.Create()
        bind(
            arguments,
            required_param(create, "name", "name"),
            optional_numeric_list_param(create, "user_ids", "user-ids"),
        )
        await engine.do(create)
        return "Skill created successfully"

    @registry.tool(
        "update-skill",
        f"Update an existing skill in a customer site of Teamwork.com. {ABOUT}",
        {"skill-id": number("The ID of the skill to update."), **SKILL_FIELDS},
        required=["skill-id"],
    )
    async def update_skill(engine, arguments):
        update = skill.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "skill-id"),
            optional_param(update, "name", "name"),
            optional_numeric_list_param(update, "user_ids", "user-ids"),
        )
        await engine.do(update)
        return "Skill updated successfully"

    @registry.tool(
        "delete-skill",
        f"Delete a skill in a customer site of Teamwork.com. {ABOUT}",
        {"skill-id": number("The ID of the skill to delete.")},
        required=["skill-id"],
    )
    async def delete_skill(engine, arguments):
        delete = skill.Delete()
        bind(arguments, required_numeric_param(delete, "id", "skill-id"))
        await engine.do(delete)
        return "Skill deleted successfully"
