from zerosetup.spec import PackageManager

MANIFEST = "package.json"
BIOME_CONFIG = "biome.json"

# Order is precedence: the first existing file is reported.
ESLINT_CONFIGS = [
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.json",
    ".eslintrc.yaml",
    ".eslintrc.yml",
    ".eslintrc",
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
]

PRETTIER_CONFIGS = [
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.yaml",
    ".prettierrc.yml",
    ".prettierrc.js",
    ".prettierrc.cjs",
    ".prettierrc.mjs",
    "prettier.config.js",
    "prettier.config.cjs",
    "prettier.config.mjs",
]

ESLINT_IGNORE = ".eslintignore"
PRETTIER_IGNORE = ".prettierignore"

LOCKFILES = [
    ("bun.lockb", PackageManager.BUN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
]

# Substrings of npm_config_user_agent, checked in this order.
USER_AGENT_SIGNALS = [
    ("bun", PackageManager.BUN),
    ("pnpm", PackageManager.PNPM),
    ("yarn", PackageManager.YARN),
    ("npm", PackageManager.NPM),
]
