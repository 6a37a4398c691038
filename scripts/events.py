import asyncio

from .settings import WINNER_PICKED_TIMEOUT


class EventTimeout(TimeoutError):
    pass


async def _listen(contract, event_name, timeout, trigger):
    listener = asyncio.ensure_future(contract.events.listen(event_name, timeout=timeout))
    # one loop step registers the listener before the trigger transacts
    await asyncio.sleep(0)
    if trigger is not None:
        trigger()
    return await listener


def wait_for_event(contract, event_name, timeout=WINNER_PICKED_TIMEOUT, trigger=None):
    """Block until ``contract`` emits ``event_name``.

    ``trigger`` is called once the listener is in place, so an event caused
    by it is not missed. Returns the event data. Raises EventTimeout once
    ``timeout`` seconds pass without the event.
    """
    result = asyncio.run(_listen(contract, event_name, timeout, trigger))
    if result["timed_out"]:
        raise EventTimeout(
            f"{event_name} not emitted by {contract.address} within {timeout}s")
    return result["event_data"]
