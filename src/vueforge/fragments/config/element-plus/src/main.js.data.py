"""Data for src/main.js: register Element Plus and its stylesheet."""


async def get_data(*, old_data):
    return {
        **old_data,
        "stylesheets": [*old_data.get("stylesheets", []), "element-plus/dist/index.css"],
        "imports": [*old_data.get("imports", []), "import ElementPlus from 'element-plus'"],
        "plugins": [*old_data.get("plugins", []), "ElementPlus"],
    }
