# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Cascading application settings with genro-scopestore.

Defaults live on the root store, each workspace and panel may override them.
Widgets subscribe to the value they need and follow whichever level currently
provides it.
"""

from genro_scopestore import Store, StoreEvents


def main():
    settings = Store()
    settings.set('font_size', 12).set('theme', 'light')

    settings.on(StoreEvents.CREATED, lambda e: print(f"new scope: {e['name']}"))
    panel = settings.for_('workspace/panel')

    panel.get('theme').subscribe(lambda value: print(f"panel theme -> {value}"))
    panel.get('font_size').subscribe(lambda value: print(f"panel font -> {value}"))

    settings.set('theme', 'dark')              # panel follows the default
    settings.set('workspace/font_size', 14)    # workspace overrides the default
    settings.set('font_size', 10)              # hidden by the workspace value
    panel.set('theme', 'high-contrast')        # panel overrides for good
    settings.set('theme', 'solarized')         # ignored by the panel

    print('panel owns:', panel.keys())
    print('root of panel:', panel.root())


if __name__ == '__main__':
    main()
