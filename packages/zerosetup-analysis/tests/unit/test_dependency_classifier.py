import pytest

from zerosetup.analysis import FORMATTER, LINTER, DependencyClassifier


@pytest.fixture
def classifier():
    return DependencyClassifier()


def test_scenario_only_legacy_tools_are_selected(classifier):
    manifest = {"devDependencies": {"eslint": "^8", "prettier": "^3", "typescript": "^5"}}

    assert classifier.classify(manifest) == ["eslint", "prettier"]


@pytest.mark.parametrize(
    "name, family",
    [
        ("eslint", LINTER),
        ("eslint-plugin-react", LINTER),
        ("eslint-config-prettier", LINTER),
        ("@eslint/js", LINTER),
        ("@typescript-eslint/parser", LINTER),
        ("@vue/eslint-config-typescript", LINTER),
        ("@company/eslint-plugin-internal", LINTER),
        ("prettier", FORMATTER),
        ("prettier-plugin-tailwindcss", FORMATTER),
        ("@prettier/plugin-xml", FORMATTER),
        ("@biomejs/biome", None),
        ("typescript", None),
        ("react", None),
        ("eslintish", None),
    ],
)
def test_family(classifier, name, family):
    assert classifier.family(name) == family
    assert classifier.matches(name) is (family is not None)


def test_order_is_dependencies_then_dev_dependencies(classifier):
    manifest = {
        "dependencies": {"react": "^18", "eslint-plugin-react": "^7", "prettier": "^3"},
        "devDependencies": {
            "@typescript-eslint/parser": "^6",
            "prettier": "^3",
            "eslint": "^8",
            "@biomejs/biome": "^1.9",
        },
    }

    assert classifier.classify(manifest) == [
        "eslint-plugin-react",
        "prettier",
        "@typescript-eslint/parser",
        "eslint",
    ]


def test_versions_are_never_inspected(classifier):
    manifest = {"devDependencies": {"eslint": "npm:@biomejs/biome@1.9.0", "vite": "eslint"}}

    assert classifier.classify(manifest) == ["eslint"]


def test_malformed_sections_are_ignored(classifier):
    manifest = {"dependencies": ["eslint"], "devDependencies": None}

    assert classifier.classify(manifest) == []


def test_protected_names_never_match():
    classifier = DependencyClassifier(protected=("@biomejs/biome", "eslint"))

    assert classifier.family("eslint") is None
    assert classifier.classify({"devDependencies": {"eslint": "^8", "prettier": "^3"}}) == [
        "prettier"
    ]


def test_result_is_a_subset_of_input(classifier):
    manifest = {
        "dependencies": {"a": "1", "eslint-config-airbnb": "1"},
        "devDependencies": {"b": "1", "prettier-plugin-svelte": "1"},
    }
    names = set(manifest["dependencies"]) | set(manifest["devDependencies"])

    result = classifier.classify(manifest)

    assert set(result) <= names
    assert len(result) == len(set(result))
