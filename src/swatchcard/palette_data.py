# palette_data.py – bundled sample snapshot of the dye palette
#
# Records follow the external palette shape {id, externalId, name, category, hexColor}.
# Production deployments load the full palette with PaletteIndex.from_json().

_ROWS = (
    # externalId, name, category, hexColor
    (5729, "Snow White", "Neutral", "#E4DFD0"),
    (5730, "Ash Grey", "Neutral", "#ACA8A2"),
    (5731, "Goobbue Grey", "Neutral", "#898784"),
    (5732, "Slate Grey", "Neutral", "#656565"),
    (5733, "Charcoal Grey", "Neutral", "#484742"),
    (5734, "Soot Black", "Neutral", "#2B2923"),
    (5735, "Rose Pink", "Reds", "#E69F96"),
    (5736, "Lilac Purple", "Reds", "#836969"),
    (5737, "Rolanberry Red", "Reds", "#5B1729"),
    (5738, "Dalamud Red", "Reds", "#781A1A"),
    (5739, "Rust Red", "Reds", "#622207"),
    (5740, "Wine Red", "Reds", "#451511"),
    (5741, "Coral Pink", "Reds", "#CC6C5E"),
    (5742, "Blood Red", "Reds", "#913B27"),
    (5743, "Salmon Pink", "Reds", "#E4AA8A"),
    (5744, "Sunset Orange", "Browns", "#B75C2D"),
    (5745, "Mesa Red", "Browns", "#7D3906"),
    (5746, "Bark Brown", "Browns", "#6A4B37"),
    (5747, "Chocolate Brown", "Browns", "#6E3D24"),
    (5748, "Russet Brown", "Browns", "#4F2D1F"),
    (5749, "Kobold Brown", "Browns", "#301E1B"),
    (5750, "Cork Brown", "Browns", "#C9A27F"),
    (5751, "Qiqirn Brown", "Browns", "#997E69"),
    (5752, "Opo-opo Brown", "Browns", "#7B5C2D"),
    (5753, "Aldgoat Brown", "Browns", "#A2875C"),
    (5754, "Pumpkin Orange", "Browns", "#C5743A"),
    (5755, "Acorn Brown", "Browns", "#8E581B"),
    (5756, "Orchard Brown", "Browns", "#644216"),
    (5757, "Chestnut Brown", "Browns", "#3D290D"),
    (5758, "Gobbiebag Brown", "Browns", "#B9A489"),
    (5759, "Shale Brown", "Browns", "#92816C"),
    (5760, "Mole Brown", "Browns", "#615245"),
    (5761, "Loam Brown", "Browns", "#3F3329"),
    (5762, "Bone White", "Yellows", "#EBD3A0"),
    (5763, "Ul Brown", "Yellows", "#B7A370"),
    (5764, "Desert Yellow", "Yellows", "#DBB457"),
    (5765, "Honey Yellow", "Yellows", "#FAC62B"),
    (5766, "Millioncorn Yellow", "Yellows", "#E49E34"),
    (5767, "Coeurl Yellow", "Yellows", "#F5D76E"),
    (5768, "Cream Yellow", "Yellows", "#F2D770"),
    (5769, "Halatali Yellow", "Yellows", "#A58430"),
    (5770, "Raisin Brown", "Yellows", "#403311"),
    (5771, "Mud Green", "Greens", "#585230"),
    (5772, "Sylph Green", "Greens", "#BBBB8A"),
    (5773, "Lime Green", "Greens", "#ABB054"),
    (5774, "Moss Green", "Greens", "#707326"),
    (5775, "Meadow Green", "Greens", "#8B9C63"),
    (5776, "Olive Green", "Greens", "#4B5232"),
    (5777, "Marsh Green", "Greens", "#323621"),
    (5778, "Apple Green", "Greens", "#9BB363"),
    (5779, "Cactuar Green", "Greens", "#658241"),
    (5780, "Hunter Green", "Greens", "#284B2C"),
    (5781, "Ochu Green", "Greens", "#406339"),
    (5782, "Adamantoise Green", "Greens", "#5F7558"),
    (5783, "Nophica Green", "Greens", "#3B4D3C"),
    (5784, "Deepwood Green", "Greens", "#1E2A21"),
    (5785, "Celeste Green", "Greens", "#96BDB9"),
    (5786, "Turquoise Green", "Greens", "#437272"),
    (5787, "Morbol Green", "Greens", "#1F4646"),
    (5788, "Ice Blue", "Blues", "#B2C4CE"),
    (5789, "Sky Blue", "Blues", "#83B0D2"),
    (5790, "Seafog Blue", "Blues", "#648598"),
    (5791, "Peacock Blue", "Blues", "#3B6886"),
    (5792, "Rhotano Blue", "Blues", "#1C3D54"),
    (5793, "Corpse Blue", "Blues", "#8E9BAC"),
    (5794, "Ceruleum Blue", "Blues", "#4F5766"),
    (5795, "Woad Blue", "Blues", "#2F3851"),
    (5796, "Ink Blue", "Blues", "#1A1F27"),
    (5797, "Raptor Blue", "Blues", "#5B7FC0"),
    (5798, "Othard Blue", "Blues", "#2F5889"),
    (5799, "Storm Blue", "Blues", "#234172"),
    (5800, "Void Blue", "Blues", "#112944"),
    (5801, "Royal Blue", "Blues", "#273067"),
    (5802, "Midnight Blue", "Blues", "#181937"),
    (5803, "Shadow Blue", "Blues", "#373747"),
    (5804, "Abyssal Blue", "Blues", "#312D57"),
    (5805, "Lavender Purple", "Purples", "#87627C"),
    (5806, "Gloom Purple", "Purples", "#514560"),
    (5807, "Currant Purple", "Purples", "#322C3B"),
    (5808, "Iris Purple", "Purples", "#B79EBC"),
    (5809, "Grape Purple", "Purples", "#3B2A3D"),
    (5810, "Lotus Pink", "Purples", "#FECEF5"),
    (5811, "Colibri Pink", "Purples", "#DC9BCA"),
    (5812, "Plum Purple", "Purples", "#79526C"),
    (5813, "Regal Purple", "Purples", "#66304E"),
)

SAMPLE_DYES: tuple[dict, ...] = tuple(
    {"id": i, "externalId": ext, "name": name, "category": cat, "hexColor": hx}
    for i, (ext, name, cat, hx) in enumerate(_ROWS, start=1)
)
