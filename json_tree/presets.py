"""
Built-in example schema used by the command-line interface.
"""

from .schema import ObjectSchema, SchemaFactory


def webserver_schema(factory: SchemaFactory) -> ObjectSchema:
    """
    Build the example schema for a webserver configuration document.

    The document has two members: ``array``, a four-position tuple of
    string, number, boolean and null with unique items, and ``webserver``,
    a block requiring ``host`` and ``port``.

    Args:
        factory: Factory that will own every node of the schema

    Returns:
        Root schema
    """
    mixed = factory.array().tuple([
        factory.string().max(50).min(5),
        factory.number().max(60).min(0),
        factory.boolean(),
        factory.null(),
    ]).unique(True)

    protocols = factory.array().item(factory.string()).unique(True).min(1)

    webserver = (factory.object()
                 .property("host", factory.string().min(1))
                 .property("port", factory.number().min(1024).max(65535))
                 .property("enable_https", factory.boolean())
                 .property("supported_protocols", protocols)
                 .property("timeout", factory.number().min(0))
                 .required("host", "port"))

    return (factory.object()
            .property("array", mixed)
            .property("webserver", webserver))
