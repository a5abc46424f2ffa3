"""Application-wide constants for the SVG icon sprite compiler.

Constants are grouped into the following categories:
- Path Constants: default source and output locations
- Output Constants: filenames of the generated artifacts
- Identifier Constants: id templates and namespacing defaults
- Layout Constants: tiling parameters
- Markup Constants: XML namespaces and element names
- Concurrency Constants: bounds for parallel file processing
"""

# Path constants
APP_NAME = "svg-icon-sprite"  # Used for the user config directory
DEFAULT_CONFIG_FILENAME = "icon-sprite.yaml"  # Config file searched when --config is absent
DEFAULT_SOURCE_DIR = "icons-source"  # Monochrome icons live directly in here
DEFAULT_COLOR_SUBDIR = "color"  # Colored icons live in <source>/color
DEFAULT_ICON_EXTENSION = ".svg"  # Recognized vector-icon file extension
DEFAULT_OUTPUT_DIR = "dist"  # Output area, cleared on every run
DEFAULT_ICONS_SUBDIR = "icons"  # Sprite, catalog and preview go in <output>/icons

# Output constants
SPRITE_FILENAME = "icons.svg"
CATALOG_FILENAME = "icons.json"
PREVIEW_FILENAME = "index.html"
MIXINS_FILENAME = "_icons-mixin.scss"
STYLES_FILENAME = "_icons.scss"
SETTINGS_FILENAME = "_icon-settings.scss"
SPRITE_URL = "./icons/icons.svg"  # Sprite location as seen from the stylesheets
CATALOG_JSON_INDENT = 2

# Identifier constants
MONO_ID_TEMPLATE = "icon-{name}"
COLOR_ID_TEMPLATE = "icon-color-{name}"
VIEW_ID_SUFFIX = "-view"
ID_DELIMITER = "__"  # Separates the icon id from an internal id: <icon-id>__<internal-id>
SHARED_REFERENCE_PREFIX = "icon-"  # References to these targets are never prefixed
MONO_STRIP_ATTRS = ["path:(fill|stroke)", "fill"]  # removeAttrs rules for mono icons

# Layout constants
ICON_GAP = 10  # Vertical space between two tiles, in sprite units

# Markup constants
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
EDITOR_NAMESPACES = frozenset(
    {
        "http://www.inkscape.org/namespaces/inkscape",
        "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://ns.adobe.com/AdobeIllustrator/10.0/",
        "http://ns.adobe.com/Graphs/1.0/",
        "http://ns.adobe.com/Variables/1.0/",
        "http://ns.adobe.com/SaveForWeb/1.0/",
        "http://ns.adobe.com/Extensibility/1.0/",
        "http://www.bohemiancoding.com/sketch/ns",
        "http://www.figma.com/figma/ns",
    }
)
NON_RENDERING_ELEMENTS = frozenset({"metadata", "title", "desc"})
DEFS_TAG = "defs"

# Concurrency constants
MAX_CONCURRENT_PARSES = 16  # Maximum icon files read and parsed at the same time

# Process exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
