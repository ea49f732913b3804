# wemd/markdown/postprocessors/root_wrapper.py
"""
Postprocessor that finalises the themed root container.

The root gets a transparent background so the article blends with the
WeChat page colour. If an earlier step lost the container, the document is
re-wrapped.
"""

from .utils import get_shared_soup, soup_to_html, update_style


def root_wrapper(html: str, context: dict, root_id: str = "wemd") -> str:
    soup = get_shared_soup(html, context)

    root = soup.find(id=root_id)
    if root is None:
        root = soup.new_tag("div", id=root_id)
        for child in list(soup.contents):
            root.append(child.extract())
        soup.append(root)

    update_style(root, [("background", "transparent")])

    return soup_to_html(context, soup)


def root_wrapper_default(html: str, context: dict) -> str:
    return root_wrapper(html, context, root_id=context.get("root_id", "wemd"))
