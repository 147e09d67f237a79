import argparse
import logging
import time

try:
    import pygame
except ImportError as exc:  # pragma: no cover - environment dependent
    raise SystemExit(
        "The desktop visualiser needs pygame 2 (pip install pygame).\n"
        f"Original error: {exc}"
    ) from exc

from riemann_surface.logging_config import setup_logging
from riemann_surface.orbit import PointerEvent, PointerKind
from riemann_surface.renderer import PygameSurface
from riemann_surface.visualiser import Params, Visualiser

logger = logging.getLogger(__name__)

PANEL_BG = (18, 18, 20)
PANEL_BORDER = (60, 60, 70)
FIELD_BG = (32, 32, 38)
FIELD_BORDER = (90, 90, 104)
FIELD_FOCUS = (120, 170, 255)
TEXT_COLOR = (230, 230, 240)
MUTED_TEXT = (170, 170, 185)

KEY_DEFAULT = 1
MOD_DEFAULT = 2


def parse_int(text, default):
    """Integer value of a form field, or default for empty, junk or zero entries."""
    try:
        value = int(text.strip())
    except ValueError:
        return default
    return value or default


class TextField:
    """Single-line text entry. numeric=True only accepts an optional sign and digits."""

    def __init__(self, rect, label, text="", numeric=False, max_len=200):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.text = text
        self.numeric = numeric
        self.max_len = max_len
        self.focused = False

    def _accepts(self, ch):
        if not ch or not ch.isprintable():
            return False
        if self.numeric:
            return ch.isdigit() or (ch == '-' and not self.text)
        return True

    def handle_event(self, event):
        """Returns 'submit' on Enter, True for any other consumed event.

        Characters come from TEXTINPUT (which also carries IME and dead-key
        composition); KEYDOWN only handles editing keys.
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return self.focused
        if not self.focused:
            return False
        if event.type == pygame.TEXTINPUT:
            added = False
            for ch in event.text:
                if self._accepts(ch) and len(self.text) < self.max_len:
                    self.text += ch
                    added = True
            return added
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return 'submit'
            if event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
                return True
        return False

    def draw(self, surface, font):
        pygame.draw.rect(surface, FIELD_BG, self.rect, border_radius=4)
        border = FIELD_FOCUS if self.focused else FIELD_BORDER
        pygame.draw.rect(surface, border, self.rect, 2, border_radius=4)

        label = font.render(self.label, True, MUTED_TEXT)
        surface.blit(label, (self.rect.left, self.rect.top - label.get_height() - 2))

        shown = self.text + ('|' if self.focused else '')
        text = font.render(shown, True, TEXT_COLOR)
        # keep the caret end visible when the text is wider than the box
        inner = self.rect.inflate(-12, 0)
        offset = max(0, text.get_width() - inner.width)
        clip = surface.get_clip()
        surface.set_clip(inner)
        surface.blit(text, (inner.left - offset, self.rect.centery - text.get_height() // 2))
        surface.set_clip(clip)


class Checkbox:
    def __init__(self, rect, label, checked=True):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.checked = checked

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.checked = not self.checked
                return True
        return False

    def draw(self, surface, font):
        box = pygame.Rect(self.rect.left, self.rect.top, self.rect.height, self.rect.height)
        pygame.draw.rect(surface, FIELD_BG, box, border_radius=3)
        pygame.draw.rect(surface, FIELD_BORDER, box, 2, border_radius=3)
        if self.checked:
            pygame.draw.rect(surface, FIELD_FOCUS, box.inflate(-8, -8), border_radius=2)
        text = font.render(self.label, True, TEXT_COLOR)
        surface.blit(text, (box.right + 8, self.rect.centery - text.get_height() // 2))


class Button:
    def __init__(self, rect, label):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.pressed = False

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return False
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.pressed:
            self.pressed = False
            return self.rect.collidepoint(event.pos)
        return False

    def draw(self, surface, font):
        fill = (70, 110, 190) if self.pressed else (50, 80, 150)
        pygame.draw.rect(surface, fill, self.rect, border_radius=6)
        pygame.draw.rect(surface, (120, 150, 220), self.rect, 2, border_radius=6)
        text = font.render(self.label, True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=self.rect.center))


def wrap_text(text, font, max_width):
    lines = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}".strip()
        if line and font.size(candidate)[0] > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


# ========================
# Desktop application using pygame
# ========================
class RiemannDesktop:
    """Scene on the left, input panel on the right. Also the core's controls collaborator."""

    def __init__(self, width=1000, height=700, text="", params=None,
                 show_torus=True, show_polynomial=True):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Riemann Surface Encryption Visualiser")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)
        self.font_small = pygame.font.SysFont(None, 18)

        params = params or Params()
        self._field_state = {
            'text': text,
            'key1': str(params.key1), 'mod1': str(params.mod1),
            'key2': str(params.key2), 'mod2': str(params.mod2),
            'key3': str(params.key3), 'mod3': str(params.mod3),
        }
        self._check_state = {'torus': show_torus, 'poly': show_polynomial}
        self.fields = {}
        self.checks = {}
        self.button = None

        self.resize(width, height)
        self.visualiser = Visualiser(self)
        self.status = self.visualiser.recompute()

    # --------- Controls collaborator ---------
    def get_input(self):
        return self.fields['text'].text

    def get_params(self):
        f = self.fields
        return Params(
            key1=parse_int(f['key1'].text, KEY_DEFAULT), mod1=parse_int(f['mod1'].text, MOD_DEFAULT),
            key2=parse_int(f['key2'].text, KEY_DEFAULT), mod2=parse_int(f['mod2'].text, MOD_DEFAULT),
            key3=parse_int(f['key3'].text, KEY_DEFAULT), mod3=parse_int(f['mod3'].text, MOD_DEFAULT),
        )

    def get_visibility(self):
        return self.checks['torus'].checked, self.checks['poly'].checked

    # --------- Layout ---------
    def _capture_widget_state(self):
        if not self.fields:
            return
        self._field_state = {name: field.text for name, field in self.fields.items()}
        self._check_state = {name: box.checked for name, box in self.checks.items()}

    def resize(self, width, height):
        self._capture_widget_state()
        self.width = max(600, width)
        self.height = max(460, height)
        self.ui_panel_width = max(260, int(self.width * 0.3))
        self.draw_width = max(300, self.width - self.ui_panel_width)
        self.scene_rect = pygame.Rect(0, 0, self.draw_width, self.height)
        self._build_widgets()

    def _build_widgets(self):
        panel_x = self.draw_width + 18
        inner_w = self.ui_panel_width - 36
        row_h = 28
        y = 80

        self.fields = {'text': TextField((panel_x, y, inner_w, row_h), "Text",
                                         self._field_state['text'])}
        y += row_h + 34

        half_w = (inner_w - 12) // 2
        rows = [("key1", "Torus key 1", "mod1", "Torus mod 1"),
                ("key2", "Torus key 2", "mod2", "Torus mod 2"),
                ("key3", "Poly key", "mod3", "Poly mod")]
        for key_name, key_label, mod_name, mod_label in rows:
            self.fields[key_name] = TextField((panel_x, y, half_w, row_h), key_label,
                                              self._field_state[key_name], numeric=True)
            self.fields[mod_name] = TextField((panel_x + half_w + 12, y, half_w, row_h), mod_label,
                                              self._field_state[mod_name], numeric=True)
            y += row_h + 34

        y -= 14
        self.checks = {
            'torus': Checkbox((panel_x, y, inner_w, 20), "Show torus", self._check_state['torus']),
            'poly': Checkbox((panel_x, y + 28, inner_w, 20), "Show polynomial surface",
                             self._check_state['poly']),
        }
        y += 70
        self.button = Button((panel_x, y, inner_w, 36), "Encrypt & Visualise")
        self.status_top = y + 52

    # --------- Drawing ---------
    def draw(self):
        area = self.scene_rect.clip(self.screen.get_rect())
        scene = PygameSurface(self.screen.subsurface(area))
        self.visualiser.render_frame(scene)
        self._draw_ui()
        pygame.display.flip()

    def _draw_ui(self):
        panel_rect = pygame.Rect(self.draw_width, 0, self.ui_panel_width, self.height)
        pygame.draw.rect(self.screen, PANEL_BG, panel_rect)
        pygame.draw.rect(self.screen, PANEL_BORDER, panel_rect, 2)

        title = self.font.render("Riemann Surface Encryption", True, TEXT_COLOR)
        self.screen.blit(title, (panel_rect.left + 18, 20))
        hint = self.font_small.render("Drag the scene to orbit", True, MUTED_TEXT)
        self.screen.blit(hint, (panel_rect.left + 18, 44))

        for field in self.fields.values():
            field.draw(self.screen, self.font_small)
        for box in self.checks.values():
            box.draw(self.screen, self.font_small)
        self.button.draw(self.screen, self.font)

        for i, line in enumerate(wrap_text(self.status.message, self.font_small, self.ui_panel_width - 36)):
            text = self.font_small.render(line, True, MUTED_TEXT)
            self.screen.blit(text, (panel_rect.left + 18, self.status_top + i * 18))

    # --------- Event handling ---------
    def refresh(self):
        self.status = self.visualiser.recompute()
        logger.debug(self.status.message)

    def _pointer(self, kind, pos=(0, 0)):
        self.visualiser.on_pointer_event(PointerEvent(kind, pos[0], pos[1]))

    def handle_event(self, event):
        if event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            self.resize(event.w, event.h)
            return

        if event.type == pygame.WINDOWLEAVE:
            self._pointer(PointerKind.LEAVE)
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 \
                and self.scene_rect.collidepoint(event.pos):
            for field in self.fields.values():
                field.focused = False
            self._pointer(PointerKind.PRESS, event.pos)
            return
        if event.type == pygame.MOUSEMOTION:
            if self.scene_rect.collidepoint(event.pos):
                self._pointer(PointerKind.MOVE, event.pos)
            elif self.visualiser.orbit.dragging:
                self._pointer(PointerKind.LEAVE, event.pos)
            return
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer(PointerKind.RELEASE, event.pos)

        if self.button.handle_event(event):
            self.refresh()
            return
        for box in self.checks.values():
            if box.handle_event(event):
                self.refresh()
                return
        for field in self.fields.values():
            if field.handle_event(event) == 'submit':
                self.refresh()
                return

    def run(self, duration=None):
        running = True
        start_time = time.time()
        logger.info("visualiser started (%dx%d)", self.width, self.height)
        while running:
            self.clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self.handle_event(event)
            self.draw()
            if duration and (time.time() - start_time) >= duration:
                running = False
        logger.info("visualiser stopped")
        pygame.quit()


def build_parser():
    parser = argparse.ArgumentParser(description="Encrypt text onto a torus and a polynomial Riemann surface")
    parser.add_argument('--width', type=int, default=1000)
    parser.add_argument('--height', type=int, default=700)
    parser.add_argument('--text', default="Hello, Riemann!")
    defaults = Params()
    for name in ('key1', 'mod1', 'key2', 'mod2', 'key3', 'mod3'):
        parser.add_argument(f'--{name}', type=int, default=getattr(defaults, name))
    parser.add_argument('--no-torus', action='store_true', help='Start with the torus set hidden.')
    parser.add_argument('--no-polynomial', action='store_true',
                        help='Start with the polynomial set hidden.')
    parser.add_argument('--duration', type=float, default=None,
                        help='Seconds to run before exiting (useful for headless testing).')
    parser.add_argument('--log-level', default='INFO')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    for name in ('mod1', 'mod2', 'mod3'):
        if getattr(args, name) == 0:
            raise SystemExit(f"--{name} must be non-zero")

    params = Params(args.key1, args.mod1, args.key2, args.mod2, args.key3, args.mod3)
    app = RiemannDesktop(args.width, args.height, text=args.text, params=params,
                         show_torus=not args.no_torus, show_polynomial=not args.no_polynomial)
    app.run(duration=args.duration)


if __name__ == '__main__':
    main()
