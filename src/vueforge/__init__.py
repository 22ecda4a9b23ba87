"""
vueforge - Vue 3 + Vite Project Scaffolder
==========================================

A CLI tool that scaffolds a new Vue 3 frontend project by composing a
library of template fragments into a single, consistent project tree.

Features
--------
- **Composable Fragments**: Base app plus optional Router, Pinia, Vitest,
  Prettier, Element Plus and TypeScript fragments
- **JSON-Aware Merging**: ``package.json`` and ``.vscode/extensions.json``
  are merged, never clobbered, when several fragments supply them
- **Data-Driven Files**: ``*.data.py`` providers feed Jinja2 ``*.j2`` templates
- **TypeScript Conversion**: The rendered tree is promoted to ``.ts`` (or
  stripped of it) in a single post-pass
- **ESLint Recipes**: Lint config generated for the chosen style guide

Quick Start
-----------
```bash
# Create a new project interactively
vueforge create my-app

# Or with flags (skips the feature prompts)
vueforge create my-app --ts --router --pinia --vitest
```

Example
-------
>>> from vueforge import ProjectConfig, create_project
>>> create_project(ProjectConfig(name="my-app", router=True))

Architecture
------------
The package is organized into these main modules:

- ``cli``: Typer-based command line interface
- ``generator``: Fragment sequencing and the generation pipeline
- ``renderer``: Fragment overlay and the data/template pass
- ``traverse``: Pre-order and post-order directory walks
- ``merge``: Recursive object merge and dependency sorting
- ``typescript``: JavaScript to TypeScript conversion pass
- ``eslint``: ESLint / Prettier / EditorConfig generation
- ``commands``: Package manager detection and command strings
- ``readme``: README generation
- ``models``: Pydantic models for configuration
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from vueforge.generator import GenerationResult, create_project
from vueforge.merge import deep_merge, sort_dependencies
from vueforge.models import ProjectConfig


__all__ = [
    "GenerationResult",
    "ProjectConfig",
    "__version__",
    "create_project",
    "deep_merge",
    "sort_dependencies",
]
