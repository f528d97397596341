"""
Descriptive reference data for the standard compounds.

Display-only: nothing here feeds the prediction engine.  Used by the
``cannablend compounds`` command and by anything that wants to show an aroma
or description next to a compound name.
"""

from __future__ import annotations

from dataclasses import dataclass

from cannablend.taxonomy.experience_taxonomy import Compound


@dataclass(frozen=True)
class CompoundInfo:
    """Aroma and background for one compound.

    Attributes:
        name:        Compound name (matches ``Compound`` value).
        aroma:       Short comma-separated aroma description.
        description: One or two sentences of background.
        found_in:    Common natural sources.
    """

    name:        str
    aroma:       str
    description: str
    found_in:    tuple[str, ...]


def _info(compound: Compound, aroma: str, description: str, *found_in: str) -> CompoundInfo:
    return CompoundInfo(
        name=compound.value, aroma=aroma, description=description, found_in=found_in
    )


COMPOUND_INFO: dict[str, CompoundInfo] = {
    info.name: info
    for info in (
        _info(
            Compound.MYRCENE, "Earthy, musky, herbal",
            "The most abundant terpene in cannabis. Associated with relaxing, "
            "sedative effects and may enhance cannabinoid absorption.",
            "Mangoes", "Lemongrass", "Hops", "Thyme",
        ),
        _info(
            Compound.LIMONENE, "Citrus, lemon, orange",
            "A mood-elevating terpene commonly linked to stress relief and "
            "uplifted energy. Known for its bright, citrusy character.",
            "Citrus peels", "Juniper", "Rosemary",
        ),
        _info(
            Compound.CARYOPHYLLENE, "Spicy, peppery, woody",
            "Unique among terpenes for binding to CB2 receptors. Associated with "
            "anti-inflammatory properties and a warm, grounding sensation.",
            "Black pepper", "Cloves", "Cinnamon", "Oregano",
        ),
        _info(
            Compound.LINALOOL, "Floral, lavender, sweet",
            "A calming terpene widely used in aromatherapy. Promotes relaxation "
            "and may help ease anxiety and restlessness.",
            "Lavender", "Birch bark", "Coriander",
        ),
        _info(
            Compound.PINENE, "Pine, fresh, sharp",
            "The most common terpene in nature. Linked to alertness and mental "
            "clarity, and may help counteract some THC-related memory effects.",
            "Pine needles", "Rosemary", "Basil", "Dill",
        ),
        _info(
            Compound.HUMULENE, "Hoppy, earthy, woody",
            "A subtle terpene that contributes to the earthy aroma of hops. "
            "Associated with mild appetite suppression and calming effects.",
            "Hops", "Sage", "Ginseng",
        ),
        _info(
            Compound.TERPINOLENE, "Piney, floral, herbal",
            "A multi-dimensional terpene with uplifting and mildly energizing "
            "qualities. Often found in sativa-leaning strains.",
            "Nutmeg", "Tea tree", "Lilacs", "Apples",
        ),
        _info(
            Compound.OCIMENE, "Sweet, herbal, woody",
            "A lighter terpene with an uplifting, energetic character. Commonly "
            "found in tropical and citrus-forward strains.",
            "Mint", "Parsley", "Orchids", "Kumquats",
        ),
        _info(
            Compound.BISABOLOL, "Floral, honey-like, delicate",
            "A gentle terpene prized for its soothing properties. Often linked to "
            "relaxation and skin-calming benefits.",
            "Chamomile", "Candeia tree",
        ),
        _info(
            Compound.EUCALYPTOL, "Minty, cool, eucalyptus",
            "A refreshing terpene associated with mental clarity and focus. Known "
            "for its invigorating, cooling sensation.",
            "Eucalyptus", "Tea tree", "Bay leaves", "Sage",
        ),
        _info(
            Compound.NEROLIDOL, "Woody, floral, citrus",
            "A sedative-leaning terpene with a complex aroma. Associated with deep "
            "relaxation and calming body effects.",
            "Jasmine", "Ginger", "Tea tree", "Lemongrass",
        ),
        _info(
            Compound.GUAIOL, "Piney, rosy, woody",
            "A sesquiterpenoid with a pine-rose aroma. Associated with gentle "
            "relaxation and mild analgesic properties.",
            "Guaiacum", "Cypress pine",
        ),
        _info(
            Compound.CAMPHENE, "Damp, woodsy, camphor",
            "A sharp, herbal terpene linked to focus and clarity. Often found "
            "alongside pinene in coniferous plants.",
            "Camphor", "Turpentine", "Ginger oil", "Valerian",
        ),
        _info(
            Compound.GERANIOL, "Rose, sweet, fruity",
            "A floral terpene with a pleasant, rosy scent. Associated with gentle "
            "relaxation and a sociable, warm mood.",
            "Roses", "Geraniums", "Citronella", "Peaches",
        ),
        _info(
            Compound.VALENCENE, "Citrus, sweet orange, fresh",
            "Named after Valencia oranges. Linked to uplifted mood and creative "
            "energy with a bright character.",
            "Valencia oranges", "Grapefruits", "Tangerines",
        ),
    )
}


def get_compound_info(name: str) -> CompoundInfo | None:
    """Reference data for ``name``, or ``None`` for a custom compound."""
    return COMPOUND_INFO.get(name.strip())
