import streamlit as st
from fovgen.config_loader import load_config
from fovgen.generator import FovGenerator
from fovgen.errors import FovGenError
from fovgen.plotting import plot_footprints

st.set_page_config(page_title="FOV Generator", layout="wide")
st.title("FOV Generator: Aladin footprints for cameras x telescopes")

# Load config (defaults to the bundled catalogs/template)
config_path = "config/config.toml"
config = load_config(config_path)


@st.cache_data
def load_footprints(resources, output):
    generator = FovGenerator.from_config({"resources": resources, "output": output})
    return generator.footprint_table()


try:
    table = load_footprints(config["resources"], config["output"])
except FovGenError as e:
    st.error(str(e))
    st.stop()

# Sidebar
st.sidebar.header("Configuration")
st.sidebar.write(f"Cameras: `{config['resources']['cameras']}`")
st.sidebar.write(f"Optics: `{config['resources']['optics']}`")
st.sidebar.write(f"Output directory: `{config['output']['directory']}`")
if config["output"]["first_pair_only"]:
    st.sidebar.warning("first_pair_only is set: only one pairing is generated.")

camera_names = list(dict.fromkeys(table["camera"]))
camera_choice = st.sidebar.selectbox("Camera:", camera_names)

show_exact = st.sidebar.checkbox("Show exact (arctangent) half fields", value=False)

# Footprint plot for the selected camera
st.subheader("Footprints")
selected = table[table["camera"] == camera_choice]
fig = plot_footprints(selected, title=f"{camera_choice} behind each optic")
st.plotly_chart(fig, width="stretch")

# Table
st.subheader("Pairings")
display_columns = ["camera", "optic", "corrector", "focal_length_mm",
                   "half_width_arcsec", "half_height_arcsec", "filename"]
if show_exact:
    display_columns += ["exact_half_width_arcsec", "exact_half_height_arcsec"]

st.write(f"{len(table)} pairings")
st.dataframe(table.round(1).loc[:, display_columns].astype(str), width="stretch")

# Generate
st.subheader("Generate")
if st.button("Write .vot files"):
    lines = []
    try:
        generator = FovGenerator.from_config(config)
        generator.run(report=lines.append)
    except (FovGenError, OSError) as e:
        st.error(str(e))
    st.write(f"{len(lines)} files written")
    st.code("\n".join(lines) if lines else "(none)")
