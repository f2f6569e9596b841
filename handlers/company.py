"""Company tools and resources."""

from handlers.params import (
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_numeric_param,
    required_param,
)
from handlers.registry import Registry, bind, boolean, dump, number, number_array, pagination, string
from teamwork import company

ABOUT = "Companies, also know as clients, are organizations that the customer offers services to."

COMPANY_FIELDS = {
    "name": string("The name of the company."),
    "address-one": string("The first line of the address of the company."),
    "address-two": string("The second line of the address of the company."),
    "city": string("The city of the company."),
    "state": string("The state of the company."),
    "zip": string("The ZIP or postal code of the company."),
    "country-code": string("The country code of the company, e.g., 'US' for the United States."),
    "phone": string("The phone number of the company."),
    "fax": string("The fax number of the company."),
    "email-one": string("The primary email address of the company."),
    "email-two": string("The secondary email address of the company."),
    "email-three": string("The tertiary email address of the company."),
    "website": string("The website of the company."),
    "profile": string("A profile description for the company."),
    "manager-id": number("The ID of the user who manages the company."),
    "industry-id": number("The ID of the industry the company belongs to."),
    "tag-ids": number_array("A list of tag IDs to associate with the company."),
}

# Text fields bound one-to-one: (attribute, argument)
_TEXT_FIELDS = (
    ("address_one", "address-one"),
    ("address_two", "address-two"),
    ("city", "city"),
    ("state", "state"),
    ("zip", "zip"),
    ("country_code", "country-code"),
    ("phone", "phone"),
    ("fax", "fax"),
    ("email_one", "email-one"),
    ("email_two", "email-two"),
    ("email_three", "email-three"),
    ("website", "website"),
    ("profile", "profile"),
)


def _field_binders(target):
    return (
        *(optional_param(target, attr, key) for attr, key in _TEXT_FIELDS),
        optional_numeric_param(target, "manager_id", "manager-id"),
        optional_numeric_param(target, "industry_id", "industry-id"),
        optional_numeric_list_param(target, "tag_ids", "tag-ids"),
    )


def register(registry: Registry) -> None:

    async def list_companies(engine):
        multiple = company.Multiple()
        await engine.do(multiple)
        return multiple.response.companies

    async def get_company(engine, company_id):
        single = company.Single(id=company_id)
        await engine.do(single)
        return single.company

    registry.collection("companies", "company", list_companies, get_company)

    @registry.tool(
        "retrieve-companies",
        f"Retrieve multiple companies, also know as clients, in a customer site of Teamwork.com. {ABOUT}",
        {
            "search-term": string(
                "A search term to filter companies by name. "
                "Each word from the search term is used to match against the company name."
            ),
            "tag-ids": number_array("A list of tag IDs to filter companies by tags."),
            "match-all-tags": boolean(
                "If true, match companies that have all the specified tags. "
                "If false, match companies that have any of them. Defaults to false."
            ),
            **pagination(),
        },
    )
    async def retrieve_companies(engine, arguments):
        multiple = company.Multiple()
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
        "retrieve-company",
        f"Retrieve a specific company, also know as client, in a customer site of Teamwork.com. {ABOUT}",
        {"company-id": number("The ID of the company.")},
        required=["company-id"],
    )
    async def retrieve_company(engine, arguments):
        single = company.Single()
        bind(arguments, required_numeric_param(single, "id", "company-id"))
        await engine.do(single)
        return dump(single.company)

    @registry.tool(
        "create-company",
        f"Create a new company, also know as client, in a customer site of Teamwork.com. {ABOUT}",
        COMPANY_FIELDS,
        required=["name"],
    )
    async def create_company(engine, arguments):
        create = company.Create()
        bind(arguments, required_param(create, "name", "name"), *_field_binders(create))
        await engine.do(create)
        return "Company created successfully"

    @registry.tool(
        "update-company",
        f"Update a company, also know as client, in a customer site of Teamwork.com. {ABOUT}",
        {"company-id": number("The ID of the company to update."), **COMPANY_FIELDS},
        required=["company-id"],
    )
    async def update_company(engine, arguments):
        update = company.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "company-id"),
            optional_param(update, "name", "name"),
            *_field_binders(update),
        )
        await engine.do(update)
        return "Company updated successfully"

    @registry.tool(
        "delete-company",
        f"Delete a company, also know as client, in a customer site of Teamwork.com. {ABOUT}",
        {"company-id": number("The ID of the company to delete.")},
        required=["company-id"],
    )
    async def delete_company(engine, arguments):
        delete = company.Delete()
        bind(arguments, required_numeric_param(delete, "id", "company-id"))
        await engine.do(delete)
        return "Company deleted successfully"
