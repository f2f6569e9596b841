"""Comment tools and resources."""

from handlers.params import (
    optional_numeric_list_param,
    optional_numeric_param,
    optional_param,
    required_numeric_param,
    required_object_param,
    required_param,
    restrict_values,
)
from handlers.registry import Registry, bind, dump, number, number_array, obj, pagination, string
from teamwork import comment

ABOUT = (
    "Within Teamwork.com, you can comment on project items such as tasks, milestones, files and notebooks."
)

LIST_FILTERS = {
    "search-term": string(
        "A search term to filter comments by the content, also know as body in the response. "
        "Each word from the search term is used to match against the comment content."
    ),
    "user-ids": number_array("A list of user IDs to filter comments by who posted them."),
    **pagination(),
}

CONTENT_TYPE = string(
    "The content type of the comment. It can be either 'TEXT' or 'HTML'.", enum=list(comment.CONTENT_TYPES)
)

# (tool name, argument, Multiple field, object name)
SCOPED_LISTS = (
    ("retrieve-file-comments", "file-id", "file_id", "file"),
    ("retrieve-milestone-comments", "milestone-id", "milestone_id", "milestone"),
    ("retrieve-notebook-comments", "notebook-id", "notebook_id", "notebook"),
    ("retrieve-task-comments", "task-id", "task_id", "task"),
)


def _list_binders(multiple: comment.Multiple):
    return (
        optional_param(multiple.filters, "search_term", "search-term"),
        optional_numeric_list_param(multiple.filters, "user_ids", "user-ids"),
        optional_numeric_param(multiple.filters, "page", "page"),
        optional_numeric_param(multiple.filters, "page_size", "page-size"),
    )


def _content_type(target):
    return optional_param(target, "content_type", "content-type", checks=[restrict_values(*comment.CONTENT_TYPES)])


def register(registry: Registry) -> None:

    async def list_comments(engine):
        multiple = comment.Multiple()
        await engine.do(multiple)
        return multiple.response.comments

    async def get_comment(engine, comment_id):
        single = comment.Single(id=comment_id)
        await engine.do(single)
        return single.comment

    registry.collection("comments", "comment", list_comments, get_comment)

    @registry.tool(
        "retrieve-comments",
        f"Retrieve multiple comments in a customer site of Teamwork.com. {ABOUT}",
        LIST_FILTERS,
    )
    async def retrieve_comments(engine, arguments):
        multiple = comment.Multiple()
        bind(arguments, *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)

    for name, key, attr, what in SCOPED_LISTS:
        _register_scoped_list(registry, name, key, attr, what)

    @registry.tool(
        "retrieve-comment",
        f"Retrieve a specific comment in a customer site of Teamwork.com. {ABOUT}",
        {"comment-id": number("The ID of the comment.")},
        required=["comment-id"],
    )
    async def retrieve_comment(engine, arguments):
        single = comment.Single()
        bind(arguments, required_numeric_param(single, "id", "comment-id"))
        await engine.do(single)
        return dump(single.comment)

    @registry.tool(
        "create-comment",
        f"Create a new comment in a customer site of Teamwork.com. {ABOUT}",
        {
            "object": obj(
                "The object to create the comment for. It can be a tasks, messages, milestones, files or notebooks.",
                {
                    "type": string("The type of object to create the comment for.", enum=list(comment.OBJECT_TYPES)),
                    "id": number("The ID of the object to create the comment for."),
                },
            ),
            "body": string("The content of the comment. The content can be added as text or HTML."),
            "content-type": CONTENT_TYPE,
        },
        required=["object", "body"],
    )
    async def create_comment(engine, arguments):
        create = comment.Create()
        bind(
            arguments,
            required_param(create, "body", "body"),
            _content_type(create),
            required_object_param(
                "object",
                required_param(create.object, "type", "type", checks=[restrict_values(*comment.OBJECT_TYPES)]),
                required_numeric_param(create.object, "id", "id"),
            ),
        )
        await engine.do(create)
        return "Comment created successfully"

    @registry.tool(
        "update-comment",
        f"Update a comment in a customer site of Teamwork.com. {ABOUT}",
        {
            "comment-id": number("The ID of the comment to update."),
            "body": string("The content of the comment. The content can be added as text or HTML."),
            "content-type": CONTENT_TYPE,
        },
        required=["comment-id", "body"],
    )
    async def update_comment(engine, arguments):
        update = comment.Update()
        bind(
            arguments,
            required_numeric_param(update, "id", "comment-id"),
            required_param(update, "body", "body"),
            _content_type(update),
        )
        await engine.do(update)
        return "Comment updated successfully"


def _register_scoped_list(registry: Registry, name: str, key: str, attr: str, what: str) -> None:
    @registry.tool(
        name,
        f"Retrieve multiple comments from a {what} in a customer site of Teamwork.com. {ABOUT}",
        {key: number(f"The ID of the {what} to retrieve comments from."), **LIST_FILTERS},
        required=[key],
    )
    async def retrieve_scoped_comments(engine, arguments):
        multiple = comment.Multiple()
        bind(arguments, required_numeric_param(multiple, attr, key), *_list_binders(multiple))
        await engine.do(multiple)
        return dump(multiple.response)
