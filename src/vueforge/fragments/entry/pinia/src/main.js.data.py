"""Data for src/main.js: install Pinia."""


def get_data(*, old_data):
    return {
        **old_data,
        "imports": [*old_data.get("imports", []), "import { createPinia } from 'pinia'"],
        "plugins": [*old_data.get("plugins", []), "createPinia()"],
    }
