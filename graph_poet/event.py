"""Event hooks fired around graph mutations.

Every representation fires the same events, with these keyword arguments:

    post_add_vertex     label, added
    pre_set_edge        edge_source, edge_target, weight
    post_set_edge       edge_source, edge_target, weight, previous
    post_remove_vertex  label, removed

Handlers are registered per graph class and receive ``(graph, event, **kwargs)``.
Registering on ``Graph`` itself covers both representations.
"""

from collections import defaultdict

# event name -> graph class -> handlers
_registrars: dict = defaultdict(lambda: defaultdict(list))


def dispatch(graph, event: str, **kwargs):
    """Call every handler registered for event on a class graph is an instance of."""
    handlers_by_class = _registrars.get(event)
    if not handlers_by_class:
        return
    for graph_class, handlers in list(handlers_by_class.items()):
        if not isinstance(graph, graph_class):
            continue
        for handler in list(handlers):
            handler(graph, event, **kwargs)


def listen(graph_class, event: str | list[str], fn):
    """Register fn for one or more events on graph_class and its subclasses."""
    for name in [event] if isinstance(event, str) else event:
        _registrars[name][graph_class].append(fn)


def listens_for(graph_class, event: str | list[str]):
    """Decorator form of :func:`listen`."""

    def decorator(fn):
        listen(graph_class, event, fn)
        return fn

    return decorator


def remove(graph_class, event: str, fn) -> bool:
    """Unregister fn. Returns False if it was not registered."""
    handlers = _registrars.get(event, {}).get(graph_class)
    if not handlers or fn not in handlers:
        return False
    handlers.remove(fn)
    return True
