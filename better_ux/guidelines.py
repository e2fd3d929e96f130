"""
UX/UI Guidance Content

Read-only dataset backing every capability response. Entries are authored
once here and looked up by exact key; nothing mutates them at runtime.

Numbered heuristics and cognitive biases only have entries where content
exists. Missing keys are reported to callers as unknown topics.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class GuidanceEntry(BaseModel):
    """A single guidance topic."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="One-line summary of the topic.")
    instructions: str = Field(..., description="Instructional body (markdown).")
    example: Optional[str] = Field(default=None, description="Optional example snippet.")


_RESPONSIVENESS = GuidanceEntry(
    description="Make the component responsive and mobile-friendly",
    instructions="""\
**Mobile-First Responsiveness:**

1. Use MUI's useMediaQuery:
   ```typescript
   import { useMediaQuery, useTheme } from '@mui/material';
   const theme = useTheme();
   const isMobile = useMediaQuery(theme.breakpoints.down('sm'));
   ```

2. Adaptive dimensions:
   - Mobile: calc(100vw - 16px) or 100%
   - Desktop: fixed values (420px, 600px, etc.)

3. Touch targets of at least 44x44px:
   ```typescript
   <IconButton sx={{ minWidth: 44, minHeight: 44 }}>
   ```

4. MUI breakpoints:
   - xs: 0px (small phone)
   - sm: 600px (large phone/tablet)
   - md: 900px (large tablet)
   - lg: 1200px (desktop)
   - xl: 1536px (large desktop)

5. Per-device transitions:
   - Mobile: Slide up
   - Desktop: Slide down or Fade""",
    example="""\
const isMobile = useMediaQuery(theme.breakpoints.down('sm'));

<Box
  sx={{
    width: isMobile ? 'calc(100vw - 16px)' : 420,
    height: isMobile ? '70vh' : 'min(600px, 80vh)',
  }}
>
  <Slide direction={isMobile ? 'up' : 'down'}>
    {children}
  </Slide>
</Box>""",
)

_MATERIAL_UI = GuidanceEntry(
    description="Apply Material-UI best practices",
    instructions="""\
**Material-UI Best Practices:**

1. Use theme.spacing (multiples of 8px):
   ```typescript
   sx={{ padding: theme.spacing(2), margin: theme.spacing(1, 2) }}
   ```

2. Use alpha() for transparency:
   ```typescript
   import { alpha } from '@mui/material/styles';
   bgcolor: alpha(theme.palette.primary.main, 0.1)
   ```

3. Prefer the sx prop over styled():
   ```typescript
   <Box sx={{ display: 'flex', gap: 2 }} />
   ```

4. Native MUI building blocks:
   - Stack for linear layout
   - Box for generic containers
   - Paper for elevation/cards

5. Smooth transitions:
   ```typescript
   transition: theme.transitions.create(['all'], {
     duration: theme.transitions.duration.standard,
     easing: theme.transitions.easing.easeInOut,
   })
   ```""",
    example="""\
<Paper
  sx={{
    p: theme.spacing(3),
    bgcolor: alpha(theme.palette.background.paper, 0.95),
    transition: theme.transitions.create(['transform', 'box-shadow'], {
      duration: 250,
      easing: 'cubic-bezier(0.4, 0, 0.2, 1)',
    }),
    '&:hover': {
      transform: 'translateY(-2px)',
      boxShadow: theme.shadows[8],
    },
  }}
>""",
)

_APPLE_DESIGN = GuidanceEntry(
    description="Apply Apple design patterns",
    instructions="""\
**Apple Design Patterns:**

1. Thin custom scrollbar:
   ```typescript
   sx={{
     overflowY: 'auto',
     '&::-webkit-scrollbar': { width: 8 },
     '&::-webkit-scrollbar-thumb': {
       bgcolor: alpha(theme.palette.text.secondary, 0.2),
       borderRadius: 4,
       '&:hover': {
         bgcolor: alpha(theme.palette.text.secondary, 0.3),
       },
     },
   }}
   ```

2. Smooth cubic-bezier animations:
   - transition: 'all 0.25s cubic-bezier(0.4, 0, 0.2, 1)'

3. Pulse animation for badges:
   ```typescript
   '@keyframes pulse': {
     '0%': { transform: 'scale(1)', opacity: 1 },
     '50%': { transform: 'scale(1.1)', opacity: 0.8 },
     '100%': { transform: 'scale(1)', opacity: 1 },
   },
   animation: 'pulse 2s infinite',
   ```

4. Minimalist design:
   - Generous spacing
   - Neutral colors with subtle accents
   - Rounded corners (borderRadius: 2-3)""",
    example="""\
<Box
  sx={{
    overflowY: 'auto',
    '&::-webkit-scrollbar': { width: 8 },
    '&::-webkit-scrollbar-thumb': {
      bgcolor: alpha(theme.palette.text.secondary, 0.2),
      borderRadius: 4,
    },
  }}
>
  <Badge
    badgeContent={count}
    sx={{
      '& .MuiBadge-badge': {
        animation: count > 0 ? 'pulse 2s infinite' : 'none',
      },
    }}
  />
</Box>""",
)

_NIELSEN_1 = GuidanceEntry(
    description="Nielsen #1 - Visibility of System Status",
    instructions="""\
**Constant Visual Feedback:**

1. Loading states on actions:
   ```typescript
   <Button disabled={isLoading}>
     {isLoading ? <CircularProgress size={20} /> : 'Save'}
   </Button>
   ```

2. Count badges:
   ```typescript
   <Badge badgeContent={unreadCount} color="error">
   ```

3. Progress indicators:
   ```typescript
   <LinearProgress variant="determinate" value={progress} />
   ```

4. Informative tooltips:
   ```typescript
   <Tooltip title="Loading data...">
   ```

5. Snackbar confirmations:
   ```typescript
   enqueueSnackbar('Saved successfully!', { variant: 'success' });
   ```""",
)

_NIELSEN_2 = GuidanceEntry(
    description="Nielsen #2 - Match Between System and the Real World",
    instructions="""\
**Speak the User's Language:**

1. Avoid technical jargon:
   - ✅ "Conversations" instead of "Tickets"
   - ✅ "Conversion rate" instead of "CVR"

2. Recognisable icons:
   - NotificationsOutlined for notifications
   - PersonOutlined for the user
   - SearchOutlined for search

3. Natural ordering:
   - Most recent first
   - Alphabetical when it makes sense
   - By priority/urgency""",
)

_NIELSEN_3 = GuidanceEntry(
    description="Nielsen #3 - User Control and Freedom",
    instructions="""\
**User Control:**

1. Always offer a cancel button:
   ```typescript
   <DialogActions>
     <Button onClick={onClose}>Cancel</Button>
     <Button variant="contained" onClick={onSave}>Save</Button>
   </DialogActions>
   ```

2. Reversible actions:
   - Close button on modals
   - Confirmation before deleting

3. Never trap the user in a flow:
   - Allow closing/going back at any time""",
)

_NIELSEN_5 = GuidanceEntry(
    description="Nielsen #5 - Error Prevention",
    instructions="""\
**Error Prevention:**

1. Real-time validation:
   ```typescript
   <TextField
     error={!!errors.cpf}
     helperText={errors.cpf?.message}
     inputProps={{ maxLength: 14, pattern: '[0-9.-]*' }}
   />
   ```

2. Demonstrative placeholders:
   ```typescript
   placeholder="000.000.000-00"
   ```

3. Disabled states:
   ```typescript
   <Button disabled={!isValid || isLoading}>
   ```

4. Confirmation on destructive actions:
   ```typescript
   <ConfirmDialog
     title="Delete item?"
     message="This action cannot be undone"
   />
   ```""",
)

_FITTS_LAW = GuidanceEntry(
    description="Fitts's Law - Larger, closer targets",
    instructions="""\
**Fitts's Law:**

1. Touch targets of at least 44x44px:
   ```typescript
   <IconButton sx={{ minWidth: 44, minHeight: 44 }}>
   ```

2. Larger primary buttons:
   ```typescript
   <Button size="large" variant="contained">
   ```

3. Adequate spacing:
   ```typescript
   <Stack spacing={2} direction="row">
   ```

4. Keep frequent actions close:
   - Place them in the header or footer
   - Easy thumb reach (mobile)""",
)

_GROUPING_EFFECT = GuidanceEntry(
    description="Grouping Effect - Keep related items together",
    instructions="""\
**Visual Grouping:**

1. Stack to group:
   ```typescript
   <Stack spacing={2}>
     <TextField label="Name" />
     <TextField label="Email" />
   </Stack>
   ```

2. Divider between sections:
   ```typescript
   <Divider sx={{ my: 2 }} />
   ```

3. Cards for contexts:
   ```typescript
   <Paper elevation={2}>
     {/* related content */}
   </Paper>
   ```

4. Typography for section titles:
   ```typescript
   <Typography variant="h6" sx={{ mb: 2 }}>
     Personal Details
   </Typography>
   ```""",
)


# Registry keys
RESPONSIVENESS = "responsiveness"
MATERIAL_UI = "material_ui"
APPLE_DESIGN = "apple_design"
FITTS_LAW = "fitts_law"
GROUPING_EFFECT = "grouping_effect"

NIELSEN_KEY_PREFIX = "nielsen_"

_GUIDELINES: Mapping[str, GuidanceEntry] = MappingProxyType({
    RESPONSIVENESS: _RESPONSIVENESS,
    MATERIAL_UI: _MATERIAL_UI,
    APPLE_DESIGN: _APPLE_DESIGN,
    NIELSEN_KEY_PREFIX + "1": _NIELSEN_1,
    NIELSEN_KEY_PREFIX + "2": _NIELSEN_2,
    NIELSEN_KEY_PREFIX + "3": _NIELSEN_3,
    NIELSEN_KEY_PREFIX + "5": _NIELSEN_5,
    FITTS_LAW: _FITTS_LAW,
    GROUPING_EFFECT: _GROUPING_EFFECT,
})


COMPLETE_UX_GUIDANCE = """\
**Complete Checklist:**

✅ Mobile-First Responsiveness
✅ Material-UI Best Practices
✅ Apple Design Patterns
✅ Nielsen's 10 Heuristics
✅ Cognitive Biases (Fitts, Grouping, Proximity, etc.)

**Apply:**
1. useMediaQuery for responsiveness
2. theme.spacing for spacing
3. alpha() for transparency
4. Tooltips on every button/icon
5. Loading states on actions
6. Clear error messages
7. Touch targets ≥ 44px
8. Smooth transitions
9. Custom scrollbar
10. Real-time validation"""

UX_CHECKLIST = """\
**UX/UI Checklist - Frontend**

Before shipping any visual component:

- [ ] Responsive (mobile, tablet, desktop)
- [ ] Touch targets ≥ 44px
- [ ] Every button/icon has a tooltip
- [ ] Loading states implemented
- [ ] Clear error messages
- [ ] theme.spacing used
- [ ] alpha() for transparency
- [ ] Smooth transitions
- [ ] Accessibility (tab navigation)
- [ ] Tested on a real mobile device
- [ ] Custom scrollbar (if list/scroll)
- [ ] Real-time validation (if form)
- [ ] Cancel button (if modal/dialog)
- [ ] Visual feedback on actions
- [ ] Logical grouping of elements"""


def get_guidance(key: str) -> Optional[GuidanceEntry]:
    """Exact-match lookup. Returns None for unknown keys."""
    return _GUIDELINES.get(key)


def heuristic_key(number: str) -> str:
    """Registry key for a (validated) Nielsen heuristic number."""
    return f"{NIELSEN_KEY_PREFIX}{number}"


def list_guidance_keys() -> tuple[str, ...]:
    return tuple(_GUIDELINES.keys())
