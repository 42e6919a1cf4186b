"""Form demo — type names, add them to a list, browse the list.

Drives ``dsl_screens.json`` headlessly: every rendered node is printed, and
alerts go to the log through ``LoggingPresenter``.
"""

import asyncio
import logging
from pathlib import Path

from dslkit.interpret import RuntimeSettings, start_session
from dslkit.load import load_screens

HERE = Path(__file__).parent


def show(session, nodes):
    screen = session.current_screen
    print(f"== {screen.id} ({session.view().title})")
    for node in nodes:
        for child in [node, *node.children]:
            label = child.props.get("label") or child.text
            print(f"   {child.type:<7} {label}")


def button(nodes, label):
    return next(b for n in nodes for b in n.find("button") if b.props["label"] == label)


async def main():
    session = start_session(
        load_screens(HERE / "dsl_screens.json"),
        settings=RuntimeSettings(
            initial_screen="telaA",
            initial_data={"form": {"nome": "", "lista": []}, "app": {"versao": "0.1.0"}},
        ),
    )

    nodes = await session.show()
    for nome in ("Ana", "Bia"):
        nodes[1].set_text(nome)
        await session.tap(button(nodes, "Adicionar"))
    show(session, await session.show())

    await session.tap(button(nodes, "Ver lista"))
    list_nodes = await session.show()
    show(session, list_nodes)

    await session.tap(button(list_nodes, "Voltar"))
    await session.tap_trailing()
    show(session, await session.show())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(main())
