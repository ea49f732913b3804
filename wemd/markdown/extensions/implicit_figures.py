# wemd/markdown/extensions/implicit_figures.py
"""
markdown-it plugin that turns stand-alone images into figures.

A paragraph whose only content is an image (optionally wrapped in a link):

    ![A cat](cat.png)

renders as

    <figure><img src="cat.png" alt="A cat"><figcaption>A cat</figcaption></figure>
"""

from markdown_it import MarkdownIt
from markdown_it.token import Token


def _image_of(children):
    if len(children) == 1 and children[0].type == "image":
        return children[0]
    if (
        len(children) == 3
        and children[0].type == "link_open"
        and children[1].type == "image"
        and children[2].type == "link_close"
    ):
        return children[1]
    return None


def implicit_figures_plugin(md: MarkdownIt, figcaption: bool = True) -> None:
    def implicit_figures(state) -> None:
        tokens = state.tokens
        for idx in range(1, len(tokens) - 1):
            token = tokens[idx]
            if token.type != "inline" or not token.children:
                continue
            if tokens[idx - 1].type != "paragraph_open" or tokens[idx + 1].type != "paragraph_close":
                continue
            # Tight list items render their paragraphs hidden
            if tokens[idx - 1].hidden:
                continue

            image = _image_of(token.children)
            if image is None:
                continue

            tokens[idx - 1].type = "figure_open"
            tokens[idx - 1].tag = "figure"
            tokens[idx + 1].type = "figure_close"
            tokens[idx + 1].tag = "figure"

            if figcaption and image.children:
                token.children.append(Token("figcaption_open", "figcaption", 1))
                token.children.extend(image.children)
                token.children.append(Token("figcaption_close", "figcaption", -1))

    md.core.ruler.push("implicit_figures", implicit_figures)
