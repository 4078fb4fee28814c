"""
XML encoding of a Configuration.

The document layout matches the files written by the Windows GUI:

    <?xml version="1.0" encoding="UTF-8"?>
    <Configuration xmlns:xsi="..." xmlns:xsd="...">
      <ConfigVersion>1</ConfigVersion>
      <TabletArea>
        <Width>80</Width>
        ...
      </TabletArea>
      <ButtonMap>
        <Button>1</Button>
        ...
      </ButtonMap>
      ...
    </Configuration>

Decoding starts from a default Configuration and only overwrites the
settings whose element is present, so a partial file keeps the defaults
for everything it leaves out.

Strings are limited to characters XML can hold. XML parsers normalize line
breaks, so a "\\r\\n" inside a command is read back as "\\n".
"""

import logging
import math
import re
from typing import Any, Callable, Dict, List, NamedTuple

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QXmlStreamReader, QXmlStreamWriter

from .configuration import Configuration, new_configuration
from .errors import ConfigParseError, ConfigTypeMismatchError
from .types import Area, OutputMode

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "Configuration"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"

_INT_PATTERN = re.compile(r'^[+-]?[0-9]+$')
_FLOAT_PATTERN = re.compile(r'^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$')
# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class ValueType(NamedTuple):
    """Text conversion for one kind of setting value."""
    name: str
    format: Callable[[Any], str]
    parse: Callable[[str], Any]


def _format_int(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    return str(value)


def _parse_int(text: str) -> int:
    text = text.strip()
    if not _INT_PATTERN.match(text):
        raise ValueError(text)
    return int(text)


def _format_float(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected number, got {type(value).__name__}")
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    # Whole numbers are written without a fraction: 4.0 -> "4"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _parse_float(text: str) -> float:
    text = text.strip()
    if text == "INF":
        return math.inf
    if text == "-INF":
        return -math.inf
    if text == "NaN":
        return math.nan
    if not _FLOAT_PATTERN.match(text):
        raise ValueError(text)
    return float(text)


def _format_bool(value: Any) -> str:
    if not isinstance(value, bool):
        raise TypeError(f"Expected bool, got {type(value).__name__}")
    return "true" if value else "false"


def _parse_bool(text: str) -> bool:
    text = text.strip()
    if text in ("true", "1"):
        return True
    if text in ("false", "0"):
        return False
    raise ValueError(text)


def _format_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    if _INVALID_XML_CHARS.search(value):
        raise ValueError("Character not allowed in XML")
    return value


def _parse_output_mode(text: str) -> OutputMode:
    return OutputMode.from_xml_name(text.strip())


def _format_output_mode(value: Any) -> str:
    if isinstance(value, bool):
        raise TypeError("Expected OutputMode, got bool")
    return OutputMode(value).xml_name


INT = ValueType("integer", _format_int, _parse_int)
FLOAT = ValueType("number", _format_float, _parse_float)
BOOL = ValueType("boolean", _format_bool, _parse_bool)
STRING = ValueType("string", _format_string, str)
OUTPUT_MODE = ValueType("output mode", _format_output_mode, _parse_output_mode)


def _format_value(value_type: ValueType, element: str, value: Any) -> str:
    try:
        return value_type.format(value)
    except (TypeError, ValueError):
        raise ConfigTypeMismatchError(element, str(value), value_type.name)


def _parse_value(value_type: ValueType, element: str, text: str) -> Any:
    try:
        return value_type.parse(text)
    except ValueError:
        raise ConfigTypeMismatchError(element, text, value_type.name)


def _write_text(writer: QXmlStreamWriter, tag: str, text: str, element: str) -> None:
    """Write a text element, failing if the writer could not write all of it."""
    writer.writeTextElement(tag, text)
    if writer.hasError():
        raise ConfigTypeMismatchError(element, text, "XML text")


def _read_text(reader: QXmlStreamReader) -> str:
    """Read the text of the current element and move past its end tag."""
    text = reader.readElementText()
    if reader.hasError():
        raise ConfigParseError(reader.errorString(), line=reader.lineNumber())
    return text


class ScalarField(NamedTuple):
    """A setting stored as a single text element."""
    element: str
    attribute: str
    value_type: ValueType

    def write(self, writer: QXmlStreamWriter, value: Any) -> None:
        _write_text(writer, self.element, _format_value(self.value_type, self.element, value), self.element)

    def read(self, reader: QXmlStreamReader) -> Any:
        return _parse_value(self.value_type, self.element, _read_text(reader))


_AREA_CHILDREN = {"Width": "width", "Height": "height", "X": "x", "Y": "y"}


class AreaField(NamedTuple):
    """A setting stored as Width/Height/X/Y child elements."""
    element: str
    attribute: str

    def write(self, writer: QXmlStreamWriter, value: Any) -> None:
        if not isinstance(value, Area):
            raise ConfigTypeMismatchError(self.element, str(value), "area")
        writer.writeStartElement(self.element)
        for child, attribute in _AREA_CHILDREN.items():
            element = f"{self.element}/{child}"
            _write_text(writer, child, _format_value(FLOAT, element, getattr(value, attribute)), element)
        writer.writeEndElement()

    def read(self, reader: QXmlStreamReader) -> Area:
        # Coordinates missing from a present area element are zero
        area = Area()
        while reader.readNextStartElement():
            child = str(reader.name())
            attribute = _AREA_CHILDREN.get(child)
            if attribute is None:
                logger.debug(f"Skipping unknown element {self.element}/{child}")
                reader.skipCurrentElement()
                continue
            element = f"{self.element}/{child}"
            setattr(area, attribute, _parse_value(FLOAT, element, _read_text(reader)))
        return area


class ListField(NamedTuple):
    """A setting stored as a container element with one child per item."""
    element: str
    attribute: str
    item_element: str
    value_type: ValueType

    def write(self, writer: QXmlStreamWriter, value: Any) -> None:
        if not isinstance(value, (list, tuple)):
            raise ConfigTypeMismatchError(self.element, str(value), "list")
        writer.writeStartElement(self.element)
        for item in value:
            element = f"{self.element}/{self.item_element}"
            _write_text(writer, self.item_element, _format_value(self.value_type, element, item), element)
        writer.writeEndElement()

    def read(self, reader: QXmlStreamReader) -> List[Any]:
        items = []
        while reader.readNextStartElement():
            child = str(reader.name())
            if child != self.item_element:
                logger.debug(f"Skipping unknown element {self.element}/{child}")
                reader.skipCurrentElement()
                continue
            element = f"{self.element}/{child}"
            items.append(_parse_value(self.value_type, element, _read_text(reader)))
        return items


# Written in this order, the same order the Windows GUI writes
CONFIGURATION_FIELDS = [
    ScalarField("ConfigVersion", "config_version", INT),
    AreaField("TabletArea", "tablet_area"),
    AreaField("TabletFullArea", "tablet_full_area"),
    ScalarField("ForceAspectRatio", "force_aspect_ratio", BOOL),
    ScalarField("Rotation", "rotation", FLOAT),
    ScalarField("Invert", "invert", BOOL),
    ScalarField("ForceFullArea", "force_full_area", BOOL),
    ScalarField("OutputMode", "output_mode", OUTPUT_MODE),
    AreaField("ScreenArea", "screen_area"),
    ScalarField("SmoothingLatency", "smoothing_latency", FLOAT),
    ScalarField("SmoothingInterval", "smoothing_interval", INT),
    ScalarField("SmoothingEnabled", "smoothing_enabled", BOOL),
    ScalarField("NoiseFilterBuffer", "noise_filter_buffer", INT),
    ScalarField("NoiseFilterThreshold", "noise_filter_threshold", FLOAT),
    ScalarField("NoiseFilterEnabled", "noise_filter_enabled", BOOL),
    ScalarField("AntiSmoothingShape", "anti_smoothing_shape", FLOAT),
    ScalarField("AntiSmoothingCompensation", "anti_smoothing_compensation", FLOAT),
    ScalarField("AntiSmoothingIgnoreWhenDragging", "anti_smoothing_ignore_when_dragging", BOOL),
    ScalarField("AntiSmoothingEnabled", "anti_smoothing_enabled", BOOL),
    AreaField("DesktopSize", "desktop_size"),
    ScalarField("AutomaticDesktopSize", "automatic_desktop_size", BOOL),
    ListField("ButtonMap", "button_map", "Button", INT),
    ScalarField("DisableButtons", "disable_buttons", BOOL),
    ListField("CommandsAfter", "commands_after", "Command", STRING),
    ListField("CommandsBefore", "commands_before", "Command", STRING),
    ScalarField("WindowWidth", "window_width", INT),
    ScalarField("WindowHeight", "window_height", INT),
    ScalarField("AutomaticRestart", "automatic_restart", BOOL),
    ScalarField("RunAtStartup", "run_at_startup", BOOL),
    ScalarField("DriverPath", "driver_path", STRING),
    ScalarField("DriverArguments", "driver_arguments", STRING),
    ScalarField("DebuggingEnabled", "debugging_enabled", BOOL),
    ScalarField("DeveloperMode", "developer_mode", BOOL),
]

FIELDS_BY_ELEMENT: Dict[str, Any] = {f.element: f for f in CONFIGURATION_FIELDS}


def encode_configuration(configuration: Configuration) -> bytes:
    """
    Serialize a configuration to an indented UTF-8 XML document.

    Args:
        configuration: Configuration to serialize

    Returns:
        The document bytes

    Raises:
        ConfigTypeMismatchError: If a setting holds a value of the wrong type
    """
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        writer = QXmlStreamWriter(buffer)
        writer.setAutoFormatting(True)
        writer.setAutoFormattingIndent(2)

        writer.writeStartDocument()
        writer.writeStartElement(ROOT_ELEMENT)
        writer.writeNamespace(XSI_NAMESPACE, "xsi")
        writer.writeNamespace(XSD_NAMESPACE, "xsd")
        for xml_field in CONFIGURATION_FIELDS:
            xml_field.write(writer, getattr(configuration, xml_field.attribute))
        writer.writeEndElement()
        writer.writeEndDocument()
    finally:
        buffer.close()

    return buffer.data().data()


def decode_configuration(data: bytes) -> Configuration:
    """
    Parse an XML document into a configuration.

    Settings without an element keep their default value. Unknown
    elements are ignored.

    Args:
        data: Document bytes

    Returns:
        Parsed configuration

    Raises:
        ConfigParseError: If the document is empty, malformed or has the
            wrong root element
        ConfigTypeMismatchError: If a setting's text cannot be converted
    """
    source = QBuffer()
    source.setData(QByteArray(data))
    source.open(QIODevice.OpenModeFlag.ReadOnly)
    try:
        return _read_document(QXmlStreamReader(source))
    finally:
        source.close()


def _read_document(reader: QXmlStreamReader) -> Configuration:
    if not reader.readNextStartElement():
        message = reader.errorString() if reader.hasError() else "Document has no root element"
        raise ConfigParseError(message, line=reader.lineNumber())

    root = str(reader.name())
    if root != ROOT_ELEMENT:
        raise ConfigParseError(
            f"Expected root element {ROOT_ELEMENT}, found {root}",
            line=reader.lineNumber(),
        )

    configuration = new_configuration()
    while reader.readNextStartElement():
        element = str(reader.name())
        xml_field = FIELDS_BY_ELEMENT.get(element)
        if xml_field is None:
            logger.debug(f"Skipping unknown element {element}")
            reader.skipCurrentElement()
            continue
        setattr(configuration, xml_field.attribute, xml_field.read(reader))

    # Anything after the root element must be whitespace or comments
    while not reader.atEnd():
        reader.readNext()

    if reader.hasError():
        raise ConfigParseError(reader.errorString(), line=reader.lineNumber())

    return configuration
