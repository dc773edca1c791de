import pygame
from yarn_trail.core.grid import Grid
from yarn_trail.algo.base import DONE
from yarn_trail.algo.glyphs import GLYPH_LINKS

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_UNVISITED = (90, 90, 90)
    COLOR_CONSUMED = (60, 100, 160) # Blue tint
    COLOR_YARN = (220, 220, 220)
    COLOR_HEAD = (255, 215, 0) # Gold

    def __init__(self, grid: Grid, walker=None, width=1280, height=720,
                 steps_per_frame=1, fps=30, record=False, close_when_done=False):
        self.grid = grid
        self.walker = walker
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame
        self.fps = fps
        self.close_when_done = close_when_done

        # Camera
        self.cell_size = 20.0 # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        from yarn_trail.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record, fps=fps)

        self.font = None
        self.running = True
        self.paused = False
        self.clock = None
        self.surface = None
        self.walk_finished = False

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        total_w = self.grid.width * self.cell_size
        total_h = self.grid.height * self.cell_size
        self.offset_x = (self.screen_width - total_w) / 2
        self.offset_y = (self.screen_height - total_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Yarn Trail - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def cell_center(self, x, y):
        cx = self.offset_x + (x + 0.5) * self.cell_size
        cy = self.offset_y + (y + 0.5) * self.cell_size
        return cx, cy

    def link_end(self, x, y, direction):
        """Midpoint of the cell edge facing 'direction'."""
        cx, cy = self.cell_center(x, y)
        half = self.cell_size / 2
        return cx + Grid.DX[direction] * half, cy + Grid.DY[direction] * half

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        size = int(self.cell_size) + 1
        line_w = max(1, int(self.cell_size / 6))

        for x, y, val in self.grid.iter_cells():
            state = val & Grid.STATE_MASK
            px = int(x * self.cell_size + self.offset_x)
            py = int(y * self.cell_size + self.offset_y)
            center = self.cell_center(x, y)

            if state == Grid.UNVISITED:
                pygame.draw.circle(self.surface, self.COLOR_UNVISITED, center, max(1, self.cell_size / 10))

            elif state == Grid.CONSUMED:
                pygame.draw.rect(self.surface, self.COLOR_CONSUMED, (px, py, size, size))

            elif state == Grid.PATH:
                links = GLYPH_LINKS[val & Grid.GLYPH_MASK]
                if not links:
                    inset = int(self.cell_size / 4)
                    pygame.draw.rect(self.surface, self.COLOR_YARN,
                                     (px + inset, py + inset, size - 2 * inset, size - 2 * inset))
                for direction in links:
                    pygame.draw.line(self.surface, self.COLOR_YARN, center,
                                     self.link_end(x, y, direction), line_w)

            elif state == Grid.OCCUPIED:
                pygame.draw.circle(self.surface, self.COLOR_HEAD, center, max(2, self.cell_size / 3))

    def draw_hud(self):
        status = "Done" if self.walk_finished else ("Paused" if self.paused else "Running")
        info = [f"Size: {self.grid.width}x{self.grid.height}", f"Status: {status}"]
        if self.walker:
            info.append(f"Steps: {self.walker.step_count}")
            info.append(f"Advances: {self.walker.advance_count} / Retreats: {self.walker.retreat_count}")
        if self.recorder.active:
            info.append("REC")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        steps = self.walker.run() if self.walker else None

        try:
            while self.running:
                self.handle_input()

                if steps and not self.walk_finished and not self.paused:
                    for _ in range(self.steps_per_frame):
                        if next(steps) == DONE:
                            self.walk_finished = True
                            break

                self.draw_grid()
                self.draw_hud()
                pygame.display.flip()

                if self.recorder.active:
                    self.recorder.capture_frame(self.surface)

                if self.walk_finished and self.close_when_done:
                    self.running = False

                self.clock.tick(self.fps)
        finally:
            # Finalize a partial video even when the walk aborts
            self.recorder.stop()
            pygame.quit()
