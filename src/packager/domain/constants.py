from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Central registry of the skeleton source, the template catalogue and the
fixed file lists used while generating a package.
"""

from typing import Any, Dict, List

CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_SKELETON_URL = "https://github.com/thephpleague/skeleton/archive/master.zip"
DEFAULT_SKELETON_DIR_NAME = "skeleton-master"
DEFAULT_MARKER_NAME = ".gitkeep"

PACKAGE_SOURCE_DIR = "src"
PACKAGE_TESTS_DIR = "tests"

# -----------------------------------------------------------------------------
# SKELETON FILES
# -----------------------------------------------------------------------------

# Files shipped by the skeleton that carry ':vendor' style placeholders
SKELETON_TOKEN_FILES: List[str] = [
    "composer.json",
    "README.md",
    "src/SkeletonClass.php",
    "tests/ExampleTest.php",
]

UNNECESSARY_FILES: List[str] = [
    "CONDUCT.md",
    "CONTRIBUTING.md",
    "ISSUE_TEMPLATE.md",
    "LICENSE.md",
    "prefill.php",
    "PULL_REQUEST_TEMPLATE.md",
]

# -----------------------------------------------------------------------------
# TEMPLATE CATALOGUE
# -----------------------------------------------------------------------------
# 'base' is either "src" (package source dir) or "root" (package dir).
# 'output' accepts the {package} and {config_file} placeholders.
TEMPLATE_TARGETS: List[Dict[str, Any]] = [
    {
        "template": "resource_controller_template.txt",
        "base": "src",
        "output": "Controllers/{package}Controller.php",
        "tokens": [":package_name:", ":controller_namespace:"],
    },
    {
        "template": "facade_template.txt",
        "base": "src",
        "output": "Facades/{package}.php",
        "tokens": [":package_name:", ":facade_namespace:", ":service_name:"],
    },
    {
        "template": "config_template.txt",
        "base": "src",
        "output": "config/{config_file}.php",
        "tokens": [],
    },
    {
        "template": "repository_template.txt",
        "base": "src",
        "output": "Repositories/{package}Repository.php",
        "tokens": [":package_name:", ":repository_namespace:"],
    },
    {
        "template": "routes_template.txt",
        "base": "src",
        "output": "routes.php",
        "tokens": [],
    },
    {
        "template": "service_provider_template.txt",
        "base": "src",
        "output": "{package}ServiceProvider.php",
        "tokens": [
            ":service_provider_namespace:",
            ":package_name:",
            ":config_file:",
            ":controllers_namespace:",
            ":service_name:",
        ],
    },
    {
        "template": "test_case_class_template.txt",
        "base": "root",
        "output": "tests/TestCase.php",
        "tokens": [":namespace:", ":package_name:"],
    },
]

SKELETON_CLASS_TEMPLATE = "skeleton_replace_template.txt"
SKELETON_CLASS_FILE = "SkeletonClass.php"
VIEWS_INDEX_FILE = "resources/views/index.blade.php"

STATIC_FILES: List[str] = [
    "phpunit.xml",
    ".gitignore",
    ".env.testing",
    ".gitlab-ci.yml",
]

# -----------------------------------------------------------------------------
# COMPOSER MANIFEST DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_COMPOSER: Dict[str, Any] = {
    "description": "Package description",
    "license": "Proprietary",
    "homepage": "",
    "authors": [
        {
            "name": "Reww Techteam",
            "email": "techadmin@reww.com",
            "homepage": "http://reww.com",
            "role": "Developer",
        }
    ],
    "require": {
        "php": "~5.6|~7.0",
    },
    "require-dev": {
        "laravel/laravel": "5.3.*",
        "phpunit/phpunit": "~5",
        "phpunit/php-code-coverage": "^4",
        "squizlabs/php_codesniffer": "~2.3",
        "phpmd/phpmd": "^2.4",
        "phpunit/phpcov": "*",
        "mockery/mockery": "*",
        "fzaninotto/faker": "^1.6",
        "symfony/css-selector": "3.1.*",
        "symfony/dom-crawler": "3.1.*",
        "barryvdh/laravel-ide-helper": "^2.2",
        "doctrine/dbal": "^2.5",
    },
}
