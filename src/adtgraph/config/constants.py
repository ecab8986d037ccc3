DEFAULTS = {
    # Written before the first neighbor on a vertex line
    "RENDER_FIRST_PREFIX": " ",
    # Written before every neighbor after the first
    "RENDER_SEPARATOR": " ,",
    # Follows the vertex itself
    "RENDER_VERTEX_SUFFIX": ":",
    # Ends every vertex line
    "RENDER_LINE_TERMINATOR": "\n",
    # Root log level used by setup_logging
    "LOG_LEVEL": "WARNING",
    # Log record format used by setup_logging
    "LOG_FORMAT": "%(asctime)s %(levelname)s %(name)s %(message)s",
}
