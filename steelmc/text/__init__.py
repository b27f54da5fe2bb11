"""Chat text: colours, click and hover events, locales, styles and components."""