from graphql import GraphQLError


def unauthorized_error():
    return GraphQLError(
        "You are not authorized to perform this action.",
        extensions={"code": "unauthorized"},
    )


def not_found_error(resource):
    return GraphQLError(
        f"Could not find the requested {resource}.",
        extensions={"code": "not_found"},
    )


def field_error(field, message):
    """Validation failure attached to a single argument."""
    return GraphQLError(message, extensions={"code": "invalid", "field": field})
