"""Shared test helpers for the dslkit test suite."""

from dslkit.interpret import CommandChannel, DataContext, Interpreter, Router
from dslkit.model.screen import Screen


class RecordingPresenter:
    """Presenter that keeps every alert it is asked to show."""

    def __init__(self):
        self.alerts: list[tuple[str, str]] = []

    def show_alert(self, title: str, message: str) -> None:
        self.alerts.append((title, message))


def make_screen(screen_id, components=None, **kwargs):
    """Build a Screen with optional components and camelCase extras."""
    return Screen.model_validate({"id": screen_id, "components": components or [], **kwargs})


def make_router(*screen_ids):
    """Router preloaded with empty screens named *screen_ids*."""
    router = Router()
    router.preload([make_screen(sid) for sid in screen_ids])
    return router


def make_interpreter(data=None, presenter=None):
    """Interpreter over *data* with a recording presenter on its channel."""
    return Interpreter(
        context=DataContext(data),
        channel=CommandChannel(presenter or RecordingPresenter()),
    )


# Document shaped like the bundled demo: a form screen that appends entries
# to a list, a list screen, and a modal.
SAMPLE_DOCUMENT = [
    {
        "id": "telaA",
        "navigationBar": {
            "title": "Cadastro",
            "displayMode": "large",
            "trailingButton": {
                "label": "Info",
                "action": {"action": "presentModal", "params": {"screen": "sobre"}},
            },
        },
        "onAppearLogic": {"set": {"var": "form.visitas", "value": 1}},
        "components": [
            {"type": "text", "value": "Olá $form.nome"},
            {"type": "input", "placeholder": "Nome", "bind": "form.nome"},
            {
                "type": "button",
                "label": "Adicionar",
                "onTap": {
                    "sequence": [
                        {"append": {"var": "form.lista", "value": {"nome": {"var": "form.nome"}}}},
                        {"set": {"var": "form.nome", "value": ""}},
                    ]
                },
            },
            {
                "type": "button",
                "label": "Ver lista",
                "onTap": {"action": "navigate", "params": {"screen": "telaB"}},
            },
            {"type": "text", "value": "oculto", "visibleIf": False},
        ],
    },
    {
        "id": "telaB",
        "navigationBar": {"title": "Lista"},
        "components": [
            {
                "type": "list",
                "items": {"var": "form.lista"},
                "rowComponents": [
                    {"type": "text", "value": "Item: $nome"},
                    {
                        "type": "button",
                        "label": "Selecionar",
                        "onTap": {"set": {"var": "selecionado", "value": {"var": "nome"}}},
                    },
                ],
            },
            {
                "type": "button",
                "label": "Voltar",
                "onTap": {"action": "navigateBack"},
            },
        ],
    },
    {
        "id": "sobre",
        "components": [
            {"type": "text", "value": {"concat": ["Versão ", {"var": "app.versao"}]}},
            {
                "type": "button",
                "label": "Fechar",
                "onTap": {"action": "dismissModal"},
            },
        ],
    },
]
