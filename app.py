import io
import logging

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from lextree import LexicographicTree
from components.benchmark import BenchConfig, probe_capacity, run_dictionary_benchmark
from components.word_list import populate
from components.work_loads import WorkLoad

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s')

# Configure page
st.set_page_config(
    page_title="LexTree Bench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("🌳 Lexicographic Tree Bench")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Load Dictionary", "Query", "Benchmark"]
    )

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🗑️ Reset Tree"):
        for key in ("tree", "words", "report"):
            st.session_state.pop(key, None)
        st.rerun()


def length_histogram(words):
    lengths = np.fromiter((len(w) for w in words), dtype=int, count=len(words))
    return pd.Series(lengths).value_counts().sort_index()


# Main content area
if page == "Home":
    st.header("Welcome to the Lexicographic Tree Bench")

    st.markdown("""
    Load a word list into a prefix tree over `a`-`z`, `-` and `'`, then query and time it.

    **Sections:**
    - 📁 Load a newline-delimited word list or generate a vocabulary
    - 🔍 Membership, prefix and length queries
    - ⏱️ Load / search / length-sweep timings and a capacity probe
    """)

    tree = st.session_state.get('tree')
    report = st.session_state.get('report')
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Words", f"{tree.size():,}" if tree else "0")

    with col2:
        st.metric("Nodes", f"{tree.count_nodes():,}" if tree else "0")

    with col3:
        st.metric("Avg Branching", f"{tree.count_nodes(get_avg_branch_factor=True):.2f}" if tree else "0")

    with col4:
        st.metric("Rejected", f"{len(report.rejected):,}" if report else "0")

elif page == "Load Dictionary":
    st.header("📁 Load Dictionary")

    source = st.radio("Source", ["Upload word list", "Generate vocabulary"], horizontal=True)
    lowercase = st.checkbox("Lowercase words before inserting", value=True)

    words = None
    label = None
    if source == "Upload word list":
        uploaded_file = st.file_uploader(
            "Choose a text file",
            type=['txt'],
            help="One word per line; empty lines are ignored"
        )
        if uploaded_file is not None:
            text = io.TextIOWrapper(uploaded_file, encoding="utf-8")
            words = [line.strip() for line in text if line.strip()]
            label = uploaded_file.name
    else:
        n = st.number_input("Number of words", min_value=1, max_value=5_000, value=500)
        seed = st.number_input("Seed", min_value=0, value=42)
        if st.button("Generate"):
            words = WorkLoad(seed=int(seed)).vocabulary(int(n))
            label = f"faker(seed={int(seed)})"

    if words is not None:
        tree = LexicographicTree()
        report = populate(tree, words, normalize=str.lower if lowercase else None, source=label)
        st.session_state['tree'] = tree
        st.session_state['words'] = words
        st.session_state['report'] = report

        st.success(f"✅ Loaded {report.inserted:,} words from {label}")

        col1, col2 = st.columns(2)

        with col1:
            st.write("**Load Report:**")
            st.write(f"- Lines: {report.lines:,}")
            st.write(f"- Inserted: {report.inserted:,}")
            st.write(f"- Duplicates: {report.duplicates:,}")
            st.write(f"- Rejected: {len(report.rejected):,}")
            if report.rejected:
                st.dataframe(pd.DataFrame({'Rejected word': report.rejected[:200]}))

        with col2:
            hist = length_histogram(tree.get_words(""))
            fig = px.bar(x=hist.index, y=hist.values, title="Word Length Distribution")
            fig.update_layout(xaxis_title="Length", yaxis_title="Words")
            st.plotly_chart(fig, use_container_width=True)

elif page == "Query":
    st.header("🔍 Query")

    tree = st.session_state.get('tree')
    if tree is None:
        st.info("📁 Please load a dictionary in the 'Load Dictionary' section first")
    else:
        tab1, tab2, tab3 = st.tabs(["Membership", "Prefix", "Length"])

        with tab1:
            word = st.text_input("Word")
            if word:
                if tree.contains(word):
                    st.success(f"'{word}' is in the dictionary")
                else:
                    st.warning(f"'{word}' is not in the dictionary")

        with tab2:
            prefix = st.text_input("Prefix")
            limit = st.slider("Show at most", min_value=10, max_value=1000, value=100)
            found = tree.get_words(prefix)
            st.write(f"**{len(found):,} words start with '{prefix}'**")
            st.dataframe(pd.DataFrame({'Word': found[:limit]}))

        with tab3:
            length = st.number_input("Length", min_value=0, max_value=64, value=3)
            found = tree.get_words_of_length(int(length))
            st.write(f"**{len(found):,} words of length {int(length)}**")
            st.dataframe(pd.DataFrame({'Word': found}))

elif page == "Benchmark":
    st.header("⏱️ Benchmark")

    words = st.session_state.get('words')

    with st.expander("Dictionary benchmark", expanded=True):
        if words is None:
            st.info("📁 Please load a dictionary in the 'Load Dictionary' section first")
        else:
            repeat = st.slider("Repetitions per phase", min_value=1, max_value=50, value=5)
            if st.button("▶️ Run dictionary benchmark"):
                lowercase = [w.lower() for w in words]
                results = run_dictionary_benchmark(lowercase, BenchConfig(repeat_count=repeat))
                st.dataframe(results, use_container_width=True)
                fig = px.bar(results, x="phase", y="mean_s", error_y="std_s", title="Mean time per phase")
                fig.update_layout(xaxis_title="Phase", yaxis_title="Seconds")
                st.plotly_chart(fig, use_container_width=True)

    with st.expander("Capacity probe"):
        num_words = st.number_input("Synthetic words", min_value=1_000, max_value=2_000_000, value=100_000, step=1_000)
        if st.button("▶️ Run capacity probe"):
            probe = probe_capacity(int(num_words), report_every=max(1, int(num_words) // 20))
            st.dataframe(probe, use_container_width=True)
            fig = px.line(probe, x="words", y="nodes", title="Nodes vs words inserted")
            st.plotly_chart(fig, use_container_width=True)

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Lexicographic Tree Bench
    </div>
    """,
    unsafe_allow_html=True
)
