"""
Options used to configure Builder and BulkBuilder objects.

An option is a function that accepts a Config and updates one of its fields.
Options are applied in order over the defaults, so a later option overrides
an earlier one for the same field.
"""
from sqlbuilder.types import Option

DEFAULT_MARKER = "(?)"
DEFAULT_PLACEHOLDER = "?"

# Only paramstyles where every placeholder is the same token can be
# repeated across rows.
POSITIONAL_PARAMSTYLES = {
    "qmark": "?",
    "format": "%s",
}


class Config:
    """Settings shared by Builder and BulkBuilder."""
    def __init__(self):
        self.size = 0
        self.marker = DEFAULT_MARKER
        self.placeholder = DEFAULT_PLACEHOLDER

    def __repr__(self):
        return (f"Config(size={self.size}, marker='{self.marker}', "
                f"placeholder='{self.placeholder}')")


def with_size(size: int) -> Option:
    """
    Return an Option that sets the size hint used when initialising the
    argument list.  The default is 0.  Negative sizes are set to 0.

    :param size: expected number of args
    """
    if size < 0:
        size = 0

    def option(config: Config) -> None:
        config.size = size

    return option


def with_marker(marker: str) -> Option:
    """
    Return an Option that sets the marker for the row placeholders in a bulk
    insert template.  The default is "(?)".  Ignored by Builder.

    :param marker: str, marker text; empty string restores the default
    """
    if not marker:
        marker = DEFAULT_MARKER

    def option(config: Config) -> None:
        config.marker = marker

    return option


def with_placeholder(placeholder: str) -> Option:
    """
    Return an Option that sets the placeholder repeated within each row of a
    bulk insert.  The default is "?".  Ignored by Builder.

    :param placeholder: str, placeholder text; empty string restores the default
    """
    if not placeholder:
        placeholder = DEFAULT_PLACEHOLDER

    def option(config: Config) -> None:
        config.placeholder = placeholder

    return option


def with_paramstyle(paramstyle: str) -> Option:
    """
    Return an Option that sets the row placeholder from a DBAPI paramstyle
    name e.g. sqlite3.paramstyle or psycopg2.paramstyle.

    :param paramstyle: str, one of 'qmark' or 'format'
    :raises ValueError: if paramstyle has no single repeatable placeholder
    """
    try:
        placeholder = POSITIONAL_PARAMSTYLES[paramstyle]
    except KeyError:
        msg = (f"Unsupported paramstyle: {paramstyle}.  "
               f"Valid paramstyles are {list(POSITIONAL_PARAMSTYLES)}")
        raise ValueError(msg) from None

    return with_placeholder(placeholder)


def defaults() -> list[Option]:
    return [
        with_marker(""),
        with_size(-1),
        with_placeholder(""),
    ]


def make_config(*options: Option) -> Config:
    """
    Return a Config with the defaults followed by each option applied in turn.

    :param options: Option functions e.g. with_size(10)
    :return: Config
    """
    config = Config()
    for option in [*defaults(), *options]:
        option(config)
    return config
