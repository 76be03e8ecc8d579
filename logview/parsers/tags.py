"""Symbolic icon and color tags; the frontend maps them to glyphs and theme colors."""

ICON_INIT = "init"
ICON_HOOK = "hook"
ICON_INFO = "info"
ICON_MESSAGE = "message"
ICON_TOOL = "tool"
ICON_THINKING = "thinking"
ICON_OK = "ok"
ICON_ERROR = "error"
ICON_INBOUND = "inbound"
ICON_DATA = "data"
ICON_BULLET = "bullet"
ICON_NONE = ""

COLOR_SYSTEM = "blue"
COLOR_ASSISTANT = "gold"
COLOR_TOOL_RESULT = "purple"
COLOR_SUCCESS = "amber"
COLOR_FAILURE = "rust"
COLOR_MUTED = "tertiary"
