"""Monitor assignment for the presenter and presentation windows"""

from twinslide.common.types import EffectiveOptions, MonitorAssignment, MonitorLayout


def monitorAssignment_compute(
    display_switch: bool,
    single_screen: bool,
    windowed: bool,
    layout: MonitorLayout,
) -> MonitorAssignment:
    """
    Map the two window roles onto physical displays

    Rules, in order:
    1. Windowed (and not single screen): both windows, neither tied to a monitor.
    2. Two or more displays: presenter on the primary (or the other one when
       switched), presentation on the remaining one of the first two.
    3. Otherwise: a single unconstrained window, the presenter unless switched.

    Args:
        display_switch: Swap presenter and presentation
        single_screen: Force a single window
        windowed: Run in windowed (development) mode
        layout: Display count and primary index

    Returns:
        Monitor assignment plan
    """
    if windowed and not single_screen:
        return MonitorAssignment(
            presenter_monitor=None,
            presentation_monitor=None,
            presenter_enabled=True,
            presentation_enabled=True,
        )

    if not windowed and not single_screen and layout.count > 1:
        # Only the first two displays take part; modulo 2 wraps between them
        if display_switch:
            presenter_monitor = (layout.primary_index + 1) % 2
        else:
            presenter_monitor = layout.primary_index
        presentation_monitor = (presenter_monitor + 1) % 2
        return MonitorAssignment(
            presenter_monitor=presenter_monitor,
            presentation_monitor=presentation_monitor,
            presenter_enabled=True,
            presentation_enabled=True,
        )

    return MonitorAssignment(
        presenter_monitor=None,
        presentation_monitor=None,
        presenter_enabled=not display_switch,
        presentation_enabled=display_switch,
    )


def monitorAssignmentFromOptions_compute(
    options: EffectiveOptions, layout: MonitorLayout
) -> MonitorAssignment:
    """
    Compute the assignment from resolved options

    Args:
        options: Effective options
        layout: Display count and primary index

    Returns:
        Monitor assignment plan
    """
    return monitorAssignment_compute(
        display_switch=options.display_switch,
        single_screen=options.single_screen,
        windowed=options.windowed,
        layout=layout,
    )
