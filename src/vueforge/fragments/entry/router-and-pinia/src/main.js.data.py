"""Data for src/main.js: install Pinia and the router."""


def get_data(*, old_data):
    return {
        **old_data,
        "imports": [
            *old_data.get("imports", []),
            "import { createPinia } from 'pinia'",
            "import router from './router'",
        ],
        "plugins": [*old_data.get("plugins", []), "createPinia()", "router"],
    }
