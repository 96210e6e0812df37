class ShellIds:
    # Navigation/location
    URL = 'url'

    # Top-level containers
    APP_SHELL = 'app-shell'
    NAV_REGION = 'nav-region'
    CONTENT_REGION = 'content-region'
    PAGE_HEADER = 'page-header'
    PAGE_CONTENT = 'page-content'

    # Sidebar state and controls
    SIDEBAR_STATE = 'sidebar-state'
    SIDEBAR_DIMENSIONS = 'sidebar-dimensions'
    NAV_BAR = 'nav-bar'
    NAV_HEADER = 'nav-header'
    NAV_BRAND_SLOT = 'nav-brand-slot'
    NAV_BRAND = 'nav-brand'
    SIDEBAR_TOGGLE = 'sidebar-toggle'
    SIDEBAR_TOGGLE_ICON = 'sidebar-toggle-icon'
    NAV_ITEMS = 'nav-items'

    # Pattern-matching id types, one entry per route
    NAV_ITEM = 'nav-item'
    NAV_ITEM_LABEL = 'nav-item-label'
