"""
vueforge test suite
===================

Test Modules
------------
- test_models.py: Tests for the Pydantic configuration model
- test_traverse.py: Tests for directory walks and empty_dir
- test_merge.py: Tests for deep_merge and dependency sorting
- test_renderer.py: Tests for fragment overlay and the data/template pass
- test_typescript.py: Tests for the TypeScript conversion pass
- test_eslint.py: Tests for ESLint config generation
- test_commands.py: Tests for package manager commands and README output
- test_generator.py: End-to-end generation tests
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_renderer.py

    # Run specific test class
    pytest tests/test_renderer.py::TestDataProviders
"""
