VERSION = "0.1.0"

TARGET_PACKAGE = "@biomejs/biome"
MINIMUM_BIOME_VERSION = "1.7.0"

TEMPLATES = ("react-ts",)

TEMPLATE_DESCRIPTIONS = {
    "react-ts": "React + TypeScript + Vite + Biome",
}
