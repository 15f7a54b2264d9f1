"""ABOUTME: Movie results widget served as an MCP resource.

The widget is static HTML that reads the tool's structured payload from
window.openai.toolOutput and renders a card list, an error banner, or an
empty-state line.
"""

WIDGET_NAME = "search_movies_widget"
WIDGET_URI = f"ui://widget/{WIDGET_NAME}.html"
SKYBRIDGE_MIME = "text/html+skybridge"

POSTER_DOMAIN = "https://image.tmdb.org"

WIDGET_TITLE = "Movie Search Results"
WIDGET_DESCRIPTION = "Displays TMDB movie search results with posters, release year, and rating."

# Resource-level _meta for the widget template
WIDGET_RESOURCE_META = {
    "openai/widgetDescription": "A list of movie cards with title, release year, rating, and poster image.",
    "openai/widgetPrefersBorder": True,
    "openai/widgetCSP": {
        "connect_domains": [],
        "resource_domains": [POSTER_DOMAIN],
    },
}

# Tool-level _meta linking search_movies to the widget
TOOL_WIDGET_META = {
    "openai/outputTemplate": WIDGET_URI,
    "openai/toolInvocation/invoking": "Searching movies...",
    "openai/toolInvocation/invoked": "Movie results ready",
    "openai/widgetAccessible": True,
    "openai/resultCanProduceWidget": True,
}

WIDGET_HTML = r"""<!doctype html>
<html>
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Movie Results</title>
    <style>
      body { font-family: ui-sans-serif, -apple-system, Segoe UI, Roboto, sans-serif; margin: 0; padding: 12px; background: #fafafa; color: #111; }
      .wrap { display: grid; gap: 10px; }
      .title { margin: 0 0 6px 0; font-size: 18px; font-weight: 700; }
      .subtitle { margin: 0 0 10px 0; color: #555; font-size: 13px; }
      .error { border: 1px solid #f3b3b3; background: #fff2f2; color: #9c1d1d; border-radius: 10px; padding: 10px; font-size: 13px; }
      .card { display: grid; grid-template-columns: 70px 1fr; gap: 10px; border: 1px solid #e5e7eb; border-radius: 12px; background: white; padding: 10px; }
      .poster { width: 70px; height: 105px; object-fit: cover; border-radius: 8px; background: #e5e7eb; }
      .poster-empty { display: grid; place-items: center; color: #555; font-size: 11px; }
      .movie-title { margin: 0 0 4px 0; font-size: 16px; font-weight: 600; }
      .meta { margin: 0; color: #444; font-size: 13px; line-height: 1.4; }
      .empty { color: #666; font-size: 13px; }
    </style>
  </head>
  <body>
    <div id="app"></div>
    <script>
      const output = window.openai?.toolOutput || {};
      const movies = Array.isArray(output.movies) ? output.movies : [];
      const app = document.getElementById("app");

      const esc = (v) => String(v ?? "")
        .replaceAll("&", "&amp;")
        .replaceAll("<", "&lt;")
        .replaceAll(">", "&gt;")
        .replaceAll('"', "&quot;")
        .replaceAll("'", "&#39;");

      const cards = movies.map((m) => {
        const poster = m.posterUrl
          ? '<img class="poster" src="' + esc(m.posterUrl) + '" alt="Poster for ' + esc(m.title) + '" loading="lazy" />'
          : '<div class="poster poster-empty">No Image</div>';
        return '<article class="card">' +
          poster +
          '<div>' +
            '<h3 class="movie-title">' + esc(m.title) + '</h3>' +
            '<p class="meta">Release Year: ' + esc(m.releaseYear) + '</p>' +
            '<p class="meta">Rating: ' + Number(m.rating || 0).toFixed(1) + '</p>' +
          '</div>' +
        '</article>';
      }).join("");

      app.innerHTML =
        '<div class="wrap">' +
          '<h2 class="title">Movie Results</h2>' +
          '<p class="subtitle">Query: ' + esc(output.query || "N/A") + '</p>' +
          (output.error ? '<div class="error">' + esc(output.error) + '</div>' : '') +
          (!output.error && movies.length === 0 ? '<p class="empty">No results to display.</p>' : '') +
          cards +
        '</div>';
    </script>
  </body>
</html>
"""
