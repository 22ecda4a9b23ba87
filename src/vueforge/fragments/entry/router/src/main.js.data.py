"""Data for src/main.js: install the router."""


def get_data(*, old_data):
    return {
        **old_data,
        "imports": [*old_data.get("imports", []), "import router from './router'"],
        "plugins": [*old_data.get("plugins", []), "router"],
    }
