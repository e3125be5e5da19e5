from ds_visualizer.domain.models import CommandSpec, StructureDefinition, StructureKind

# ==============================================================================
# SHARED VERBS
# ==============================================================================

CLEAR = CommandSpec(verb="clear", min_args=0, max_args=0, usage="clear")

TRAVERSALS = [
    CommandSpec(verb=order, min_args=0, max_args=0, usage=order)
    for order in ("preorder", "inorder", "postorder", "levelorder")
]


def _index(*specs: CommandSpec) -> dict:
    return {spec.verb: spec for spec in specs}


# ==============================================================================
# QUEUE
# ==============================================================================

QUEUE = StructureDefinition(
    kind=StructureKind.QUEUE,
    title="Queue",
    empty_message="Queue is empty",
    commands=_index(
        CommandSpec(
            verb="enqueue",
            min_args=1,
            max_args=None,
            usage="enqueue [values]...",
            varargs=True,
        ),
        CommandSpec(verb="dequeue", min_args=0, max_args=0, usage="dequeue"),
        CommandSpec(verb="peek_front", min_args=0, max_args=0, usage="peek_front"),
        CommandSpec(verb="peek_rear", min_args=0, max_args=0, usage="peek_rear"),
        CLEAR,
    ),
)

# ==============================================================================
# BINARY SEARCH TREE
# ==============================================================================

BST = StructureDefinition(
    kind=StructureKind.BST,
    title="Binary Search Tree",
    empty_message="Tree empty",
    commands=_index(
        CommandSpec(
            verb="insert",
            min_args=1,
            max_args=None,
            usage="insert [values]...",
            varargs=True,
        ),
        CommandSpec(verb="search", min_args=1, max_args=1, usage="search [value]"),
        CommandSpec(verb="peek_min", min_args=0, max_args=0, usage="peek_min"),
        CommandSpec(verb="peek_max", min_args=0, max_args=0, usage="peek_max"),
        CommandSpec(verb="remove", min_args=1, max_args=1, usage="remove [value]"),
        CLEAR,
        *TRAVERSALS,
    ),
)

# ==============================================================================
# MAX HEAP
# ==============================================================================

HEAP = StructureDefinition(
    kind=StructureKind.HEAP,
    title="Max Heap",
    empty_message="Heap empty",
    commands=_index(
        CommandSpec(
            verb="create",
            min_args=0,
            max_args=None,
            usage="create [values]...",
            varargs=True,
        ),
        CommandSpec(
            verb="insert",
            min_args=1,
            max_args=None,
            usage="insert [values]...",
            varargs=True,
        ),
        CommandSpec(verb="peek_max", min_args=0, max_args=0, usage="peek_max"),
        CommandSpec(verb="remove_max", min_args=0, max_args=0, usage="remove_max"),
        CLEAR,
        *TRAVERSALS,
    ),
)
