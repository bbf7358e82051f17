# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Correspondence analysis of a contingency table."""

from ..analysis import correspondence_analysis
from ..datasets import load_hair_eye
from ..narrative import format_pvalue
from ..plot import plot_ca_map
from ..stats import chi_square_test
from ._registry import register


@register(
    "correspondence_analysis",
    "Correspondence analysis",
    tags=("dimensionality", "categorical"),
    requires=("scipy", "matplotlib"),
)
def build(doc, seed):
    """
    Map the association between hair and eye colour of 592 students:
    test the table for independence, then decompose its inertia into
    dimensions that place similar categories close together.
    """
    table = load_hair_eye(as_table=True)
    doc.code("table = load_hair_eye(as_table=True)")
    doc.table(table, caption="Hair colour (rows) by eye colour (columns)",
              floatfmt=".0f")

    doc.heading("Independence test")
    test = chi_square_test(table)
    doc.text(
        f"The chi-square statistic is {test.statistic:.1f} on {test.dof} "
        f"degrees of freedom ({format_pvalue(test.pvalue)}): hair and eye "
        "colour are clearly associated. The test says nothing about which "
        "categories go together; correspondence analysis does.")

    doc.heading("Decomposition of the inertia")
    result = correspondence_analysis(table, n_components=2)
    doc.code("result = correspondence_analysis(table, n_components=2)")
    doc.table(result.inertia, floatfmt=".4f")
    doc.text(
        f"The total inertia, chi-square divided by the sample size, is "
        f"{result.total_inertia:.4f}. The first dimension holds "
        f"{100 * result.inertia['ratio'].iloc[0]:.1f}% of it and the first two "
        f"{100 * result.inertia['cumulative'].iloc[1]:.1f}%, so the plane "
        "below is a faithful summary of the table.")
    doc.table(result.row_coordinates.join(result.row_masses), floatfmt=".3f")
    doc.table(result.column_coordinates.join(result.column_masses),
              floatfmt=".3f")
    doc.figure(plot_ca_map(result), "map",
               "Hair and eye colours on the first two dimensions")
    dim1 = result.row_coordinates["Dim1"]
    doc.text(
        f"The first dimension runs from {dim1.idxmin()} to {dim1.idxmax()} "
        "hair, a dark-to-light axis along which blue eyes sit with blond "
        "hair and brown eyes with black hair. Categories close together on "
        "the map co-occur more often than independence predicts.")

    doc.record("chi2", test.statistic)
    doc.record("chi2_pvalue", test.pvalue)
    doc.record("total_inertia", float(result.total_inertia))
    doc.record("dim1_ratio", float(result.inertia["ratio"].iloc[0]))
