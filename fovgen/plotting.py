import plotly.graph_objects as go


def plot_footprints(df, title="Footprints"):
    """
    Centered footprint rectangles, one trace per row of a footprint table.
    x = offset along sensor width, y = offset along sensor height (arcmin)
    """
    fig = go.Figure()

    fig.update_layout(
        width=900,
        height=700,
        margin=dict(l=80, r=80, t=80, b=80),
    )

    # ----------------------------
    # One closed rectangle per pairing
    # ----------------------------
    if df is not None and not df.empty:
        for _, row in df.iterrows():
            hw = row["half_width_arcsec"] / 60.0
            hh = row["half_height_arcsec"] / 60.0

            label = row["filename"].rsplit(".", 1)[0]
            hover = (
                f"<b>{row['camera']}</b> + {row['optic']}<br>"
                f"{2 * hw:.1f}' x {2 * hh:.1f}'"
            )

            fig.add_trace(go.Scatter(
                x=[-hw, -hw, hw, hw, -hw],
                y=[-hh, hh, hh, -hh, -hh],
                mode="lines",
                name=label,
                hovertext=hover,
                hoverinfo="text",
            ))

    # ----------------------------
    # Layout
    # ----------------------------
    fig.update_layout(
        title=title,
        xaxis=dict(title="Width offset (arcmin)", zeroline=True),
        yaxis=dict(title="Height offset (arcmin)", zeroline=True, scaleanchor="x", scaleratio=1),
        showlegend=True,
    )

    return fig
