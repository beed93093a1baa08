import importlib

# Registration order; listing order follows it.
DOMAINS = ("leads", "citas", "servicios", "tasks", "mensajes", "interactions", "notes")


def load_tools(domains=DOMAINS):
    """
    Import each domain module inside the tools/ package, in order.
    Each domain module must expose:
      - TOOLS (list[ToolDescriptor])
    """
    package_name = __name__.rsplit(".", 1)[0]  # "tools"

    descriptors = []
    for name in domains:
        m = importlib.import_module(f"{package_name}.{name}")
        tools = getattr(m, "TOOLS", None)
        if tools is None:
            raise ImportError(f"Tool module {m.__name__} does not define TOOLS")
        descriptors.extend(tools)

    return descriptors
