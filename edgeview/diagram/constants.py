"""PlantUML fragments used by the diagram generator."""

START_MARKER = "@startuml"
LAYOUT_DIRECTIVE = "left to right direction"
END_MARKER = "@enduml"

NODE_KEYWORD = "circle"
ARROW = "-->"
