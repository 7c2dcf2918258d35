"""Display constants: mask colours, generated id suffixes, label placement."""

# Mask convention: white reveals, black hides
MASK_VISIBLE = "white"
MASK_HIDDEN = "black"

# Ids derived from the rendered surface id
MASK_SUFFIX = "_mask"
MASK_OUTER_SUFFIX = "_mask_surface_outer"
MASK_INNER_SUFFIX = "_mask_surface_inner"

# Ids derived from the eta-line group id
ETA_LINE_INFIX = "_eta_line_"
ETA_LABEL_INFIX = "_eta_label_"

LABEL_OFFSET_FACTOR = 0.5          # label offset along the ray, in font sizes
