from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from post_excerpt.config import Settings, settings as default_settings
from post_excerpt.content.models import MetaBox, RenderContext, RequestContext
from post_excerpt.content.renderer import ExcerptRenderGate
from post_excerpt.content.shortcodes import ShortcodeRegistry
from post_excerpt.editor.metabox import replace_metabox
from post_excerpt.editor.toolbar import TEENY_BUTTONS_FILTER, remove_alignment_buttons
from post_excerpt.host import Host
from post_excerpt.hooks import HookRegistry

PLUGIN_DIR = Path(__file__).parent
SCRIPT_PATH = "js/advanced-post-excerpt.js"


class AdvancedPostExcerpt:
    """
    Hooks the plugin into its host:
      • init                        → load the text domain
      • add_meta_boxes              → swap the excerpt meta box
      • wp                          → install the excerpt render filter on single posts
      • teeny_mce_buttons           → drop alignment buttons from the excerpt editor
      • enqueue_block_editor_assets → hide the block editor's own excerpt panel
    """

    def __init__(
        self,
        host: Host,
        hooks: HookRegistry,
        shortcodes: ShortcodeRegistry,
        context_provider: Callable[[], RenderContext],
        settings: Settings = default_settings,
    ) -> None:
        self.host = host
        self.hooks = hooks
        self.settings = settings
        self.gate = ExcerptRenderGate(
            hooks,
            shortcodes,
            context_provider,
            post_type=settings.SINGULAR_POST_TYPE,
            priority=settings.RENDER_FILTER_PRIORITY,
        )
        self.meta_box: Optional[MetaBox] = None

    def register(self) -> None:
        self.hooks.add_action("init", self.load_textdomain)
        self.hooks.add_action("add_meta_boxes", self.replace_metabox)
        self.hooks.add_action("wp", self.gate.apply)
        self.hooks.add_filter(TEENY_BUTTONS_FILTER, remove_alignment_buttons, 10, 2)
        self.hooks.add_action("enqueue_block_editor_assets", self.remove_panel_from_block_editor)
        logger.info(f"{self.settings.PLUGIN_NAME} {self.settings.PLUGIN_VERSION} registered")

    def load_textdomain(self) -> bool:
        return self.host.translations.load_textdomain(self.settings.TEXT_DOMAIN, PLUGIN_DIR / "languages")

    def replace_metabox(self) -> MetaBox:
        title = self.host.translate("Excerpt", "meta box heading", self.settings.TEXT_DOMAIN)
        self.meta_box = replace_metabox(
            self.host.meta_boxes,
            self.hooks,
            self.host.post_types_by_support,
            editor=self.host.editor,
            title=title,
        )
        return self.meta_box

    def remove_panel_from_block_editor(self) -> None:
        self.host.scripts.enqueue_script(
            self.settings.TEXT_DOMAIN,
            f"{self.host.plugins_url.rstrip('/')}/{SCRIPT_PATH}",
            ["wp-edit-post"],
            self.settings.PLUGIN_VERSION,
            True,
        )

    def on_request(self, request: RequestContext) -> None:
        self.hooks.do_action("wp", request)
