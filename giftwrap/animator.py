import matplotlib.pyplot as plt
import matplotlib.animation as animation

from giftwrap.playback import frame_state, playback_frames

DEFAULT_INTERVAL = 300  # milliseconds between frames


def build_artists(ax):
    """Create the (initially empty) artists the animation updates."""
    artists = {}
    artists['points'] = ax.scatter([], [], c='blue', s=30, label="All Points")
    artists['hull'], = ax.plot([], [], 'g-', lw=2, label="Convex Hull")
    artists['scan'], = ax.plot([], [], 'r-', lw=1, label="Current-to-Tried")
    artists['pivot'], = ax.plot([], [], 'o', ms=12, mec='orange', mfc='None', mew=2, label="Current Point")
    artists['collinear'], = ax.plot([], [], 's', ms=8, mec='purple', mfc='None', mew=1.5, label="Collinear")
    artists['status'] = ax.text(0.02, 0.98, "", transform=ax.transAxes, ha="left", va="top", fontsize=9,
                                bbox=dict(boxstyle="round,pad=0.3", fc="wheat", alpha=0.7))
    return artists


def setup_axes(ax, artists, points):
    min_x = min(p[0] for p in points) - 1
    max_x = max(p[0] for p in points) + 1
    min_y = min(p[1] for p in points) - 1
    max_y = max(p[1] for p in points) + 1
    ax.set_xlim(min_x, max_x)
    ax.set_ylim(min_y, max_y)
    ax.set_aspect('equal', adjustable='box')
    ax.legend(fontsize='small', loc='lower right')
    ax.set_title("Gift Wrapping (Jarvis March)")

    artists['points'].set_offsets([(p[0], p[1]) for p in points])
    for key in ('hull', 'scan', 'pivot', 'collinear'):
        artists[key].set_data([], [])
    artists['status'].set_text("Initializing...")
    return tuple(artists.values())


def draw_frame(artists, trace, frame):
    state = frame_state(trace, frame)

    path = state['hull_path']
    artists['hull'].set_data([p[0] for p in path], [p[1] for p in path])
    if frame.is_complete:
        artists['hull'].set_color('purple')
        artists['hull'].set_linewidth(3)
    else:
        artists['hull'].set_color('green')
        artists['hull'].set_linewidth(2)

    current, tried = state['current_point'], state['tried_point']
    if current is not None:
        artists['pivot'].set_data([current[0]], [current[1]])
        artists['scan'].set_data([current[0], tried[0]], [current[1], tried[1]])
    else:
        artists['pivot'].set_data([], [])
        artists['scan'].set_data([], [])

    collinear = state['collinear_points']
    artists['collinear'].set_data([p[0] for p in collinear], [p[1] for p in collinear])
    artists['status'].set_text(state['status'])
    return tuple(artists.values())


def animate_trace(points, trace, interval=DEFAULT_INTERVAL, ax=None):
    """
    Builds a FuncAnimation replaying `trace` over `points`.
    Returns (figure, animation); keep a reference to the animation while it plays.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure
    artists = build_artists(ax)

    ani = animation.FuncAnimation(fig,
                                  lambda frame: draw_frame(artists, trace, frame),
                                  frames=list(playback_frames(trace)),
                                  init_func=lambda: setup_axes(ax, artists, points),
                                  blit=True,
                                  interval=interval,
                                  repeat=False)
    return fig, ani
