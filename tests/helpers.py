from search import Action


def actions(steps):
    return [s.action for s in steps]


def visits(steps):
    return [s.current_node for s in steps if s.action == Action.VISIT]
