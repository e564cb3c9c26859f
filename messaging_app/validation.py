"""
Request body helpers

Client input that has the wrong shape ends in a 400, never in a 500.
"""

from messaging_app.errors import ValidationFailure


def json_object(request):
    """The JSON body as a dict; an absent or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationFailure('Request body must be a JSON object')
    return data


def string_field(data, name):
    """``data[name]`` if it is a string, None if absent."""
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationFailure(f'{name} must be a string')
    return value
