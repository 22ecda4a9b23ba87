"""Data for src/main.js: a bare app with no plugins."""


def get_data(*, old_data):
    return {
        "stylesheets": [],
        "imports": [],
        "plugins": [],
        **old_data,
    }
