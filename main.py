import json
from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError
from log import Logger, LogLevel
from css_selector import CssSelectorBuilder, Selector, Fragment, SelectorError

__version__ = 0.1


def load_config() -> dict:
    with open('config.json', 'r') as f:
        config = json.load(f)
        return config


def build_selector(recipe: list | dict) -> Selector:
    """
    Build a selector from its `config.json` recipe.

    A recipe is either a list of `[kind, value]` parts, e.g.
    `[["element", "a"], ["pseudo-class", "focus"]]`, or a combination
    `{"left": recipe, "combinator": "+", "right": recipe}`.
    """
    if isinstance(recipe, dict):
        return CssSelectorBuilder.combine(
            build_selector(recipe['left']),
            recipe['combinator'],
            build_selector(recipe['right'])
        )
    if not isinstance(recipe, list):
        raise ValueError(f"Recipe must be a list of parts or a combination, got {recipe!r}")
    selector = Selector()
    for part in recipe:
        if not (isinstance(part, list) and len(part) == 2 and isinstance(part[0], str)):
            raise ValueError(f"Recipe parts must be [kind, value] pairs, got {part!r}")
        kind, value = part
        selector.add(Fragment.from_name(kind), value)
    return selector


def build_selectors(recipes: dict, logger: Logger) -> dict[str, Selector]:
    """
    Build every named recipe; invalid recipes are logged and skipped
    """
    selectors = {}
    for name, recipe in recipes.items():
        try:
            selectors[name] = build_selector(recipe)
        except (SelectorError, ValueError, KeyError) as e:
            logger.log_error(f"selector {name!r}", e)
            continue
        logger.log(f"{name}: {selectors[name]}")
    logger.log(f"Built {len(selectors)} of {len(recipes)} selectors")
    return selectors


def count_matches(html: str, selectors: dict[str, Selector], logger: Logger) -> dict[str, int]:
    """
    Number of elements in `html` matched by each selector.

    Selectors soupsieve cannot evaluate, such as pseudo-elements or
    unknown combinators, are logged and left out of the result.
    """
    soup = BeautifulSoup(html, 'html.parser')
    counts = {}
    for name, selector in selectors.items():
        try:
            counts[name] = len(soup.select(str(selector)))
        except (SelectorSyntaxError, NotImplementedError) as e:
            logger.log_error(f"matching {name!r} ({selector})", e, LogLevel.WARNING)
    return counts


def match_html(path: str, selectors: dict[str, Selector]):
    logger.log(f"Matching selectors against {path}")
    with open(path, 'r', encoding='utf-8') as f:
        html = f.read()
    counts = count_matches(html, selectors, logger)
    for name, count in counts.items():
        level = LogLevel.INFO if count else LogLevel.WARNING
        logger.log(f"{name} matched {count} elements", level)
    logger.log(f"Matched {len(counts)} of {len(selectors)} selectors")


def main():
    global config
    global logger
    config = load_config()
    with Logger.from_config(config) as logger:
        mode = "Production" if config['production'] else "Development"
        logger.log(f'css-selector-kit version {__version__}, "{mode} Mode"')
        selectors = build_selectors(config['selectors'], logger)
        if config.get('html_path'):
            match_html(config['html_path'], selectors)


if __name__ == '__main__':
    main()
