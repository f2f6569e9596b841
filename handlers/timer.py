"""Timer tools and resources."""

from handlers.params import optional_numeric_param, optional_param, required_numeric_param
from handlers.registry import Registry, bind, boolean, dump, number, pagination, string
from teamwork import timer

ABOUT = "Timer is used to track ongoing work that will generate timelogs."

TIMER_FIELDS = {
    "description": string("A description of the timer."),
    "billable": boolean("If true, the timer is billable. Defaults to false."),
    "running": boolean("If true, the timer will start running immediately."),
    "project-id": number("The ID of the project to associate the timer with."),
    "task-id": number("The ID of the task to associate the timer with."),
}

# (tool name, entity, verb, extra description)
TRANSITIONS = (
    ("pause-timer", timer.Pause, "paused", "Pause a running timer"),
    ("resume-timer", timer.Resume, "resumed", "Resume a paused timer"),
    (
        "complete-timer",
        timer.Complete,
        "completed",
        "Complete a running timer. A timer must have a project ID associated with it to be completed, "
        "and the user should be a member of the project to log the time",
    ),
)


def _field_binders(target):
    return (
        optional_param(target, "description", "description"),
        optional_param(target, "billable", "billable", bool),
        optional_param(target, "running", "running", bool),
        optional_numeric_param(target, "project_id", "project-id"),
        optional_numeric_param(target, "task_id", "task-id"),
    )


def register(registry: Registry) -> None:

    async def list_timers(engine):
        multiple = timer.Multiple()
        await engine.do(multiple)
        return multiple.response.timers

    async def get_timer(engine, timer_id):
        single = timer.Single(id=timer_id)
        await engine.do(single)
        return single.timer

    registry.collection("timers", "timer", list_timers, get_timer)

    @registry.tool(
        "retrieve-timers",
        f"Retrieve multiple timers in a customer site of Teamwork.com. {ABOUT}",
        {
            "user-id": number(
                "The ID of the user to filter timers by. Only timers associated with this user will be returned."
            ),
            "task-id": number(
                "The ID of the task to filter timers by. Only timers associated with this task will be returned."
            ),
            "project-id": number(
                "The ID of the project to filter timers by. "
                "Only timers associated with this project will be returned."
            ),
            "running-timers-only": boolean(
                "If true, only running timers will be returned. Defaults to false, which returns all timers."
            ),
            **pagination(),
        },
    )
    async def retrieve_timers(engine, arguments):
        multiple = timer.Multiple()
        bind(
            arguments,
            optional_numeric_param(multiple.filters, "user_id", "user-id"),
            optional_numeric_param(multiple.filters, "task_id", "task-id"),
            optional_numeric_param(multiple.filters, "project_id", "project-id"),
            optional_param(multiple.filters, "running_timers_only", "running-timers-only", bool),
            optional_numeric_param(multiple.filters, "page", "page"),
            optional_numeric_param(multiple.filters, "page_size", "page-size"),
        )
        await engine.do(multiple)
        return dump(multiple.response)

    @registry.tool(
        "retrieve-timer",
        f"Retrieve a specific timer in a customer site of Teamwork.com. {ABOUT}",
        {"timer-id": number("The ID of the timer.")},
        required=["timer-id"],
    )
    async def retrieve_timer(engine, arguments):
        single = timer.Single()
        bind(arguments, required_numeric_param(single, "id", "timer-id"))
        await engine.do(single)
        return dump(single.timer)

    @registry.tool(
        "create-timer",
        f"Create a new timer in a customer site of Teamwork.com. {ABOUT}",
        {
            **TIMER_FIELDS,
            "seconds": number("The number of seconds to set the timer for."),
            "stop-running-timers": boolean(
                "If true, any other running timers will be stopped when this timer is created."
            ),
        },
    )
    async def create_timer(engine, arguments):
        create = timer.Create()
        bind(
            arguments,
            *_field_binders(create),
            optional_numeric_param(create, "seconds", "seconds"),
            optional_param(create, "stop_running_timers", "stop-running-timers", bool),
        )
        await engine.do(create)
        return "Timer created successfully"

    @registry.tool(
        "update-timer",
        f"Update a timer in a customer site of Teamwork.com. {ABOUT}",
        {"timer-id": number("The ID of the timer to update."), **TIMER_FIELDS},
        required=["timer-id"],
    )
    async def update_timer(engine, arguments):
        update = timer.Update()
        bind(arguments, required_numeric_param(update, "id", "timer-id"), *_field_binders(update))
        await engine.do(update)
        return "Timer updated successfully"

    for name, entity, verb, summary in TRANSITIONS:
        _register_transition(registry, name, entity, verb, summary)


def _register_transition(registry: Registry, name: str, entity, verb: str, summary: str) -> None:
    @registry.tool(
        name,
        f"{summary} in a customer site of Teamwork.com. {ABOUT}",
        {"timer-id": number("The ID of the timer.")},
        required=["timer-id"],
    )
    async def transition(engine, arguments):
        change = entity()
        bind(arguments, required_numeric_param(change, "id", "timer-id"))
        await engine.do(change)
        return f"Timer {verb} successfully"
