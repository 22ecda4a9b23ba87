"""
vueforge.templates - Jinja2 Template Files
==========================================

This package contains the Jinja2 templates vueforge renders itself, as
opposed to the fragment library in ``vueforge/fragments``, which is copied
into generated projects.

Templates use the .j2 extension; the output filename is the template name
without it.

Available Templates
-------------------
- README.md.j2: README of the generated project

Template Context
----------------
    project_name : str
    needs_typescript, needs_vitest, needs_eslint : bool
    commands : dict[str, str]
        Package manager commands keyed by script name (install, dev, ...)

Usage
-----
>>> from jinja2 import Environment, PackageLoader
>>> env = Environment(loader=PackageLoader("vueforge", "templates"))
>>> env.get_template("README.md.j2").render(project_name="demo", commands={})
"""
